from __future__ import annotations

import random
from typing import List, Optional

# Weighting policy for spawned characters. The next needed letter dominates,
# other letters still left in the word share a smaller weight, and blanks
# open gaps between meaningful draws.
NEXT_WEIGHT = 5
OTHER_WEIGHT = 3
SPACING_DIVISOR = 4

BLANK = " "


def generate_bag(typed_progress: str, target: str) -> List[str]:
    remaining = target[len(typed_progress):]
    if not remaining:
        return [BLANK]

    next_letter = remaining[0].lower()
    selection = [next_letter] * NEXT_WEIGHT

    # dict keeps first-appearance order
    for letter in dict.fromkeys(remaining.lower()):
        if letter == next_letter or letter == BLANK:
            continue
        selection.extend([letter] * OTHER_WEIGHT)

    spaces = len(selection) // SPACING_DIVISOR
    return selection + [BLANK] * spaces


def draw(bag: List[str], rng: Optional[random.Random] = None) -> str:
    if not bag:
        return BLANK
    return (rng or random).choice(bag)
