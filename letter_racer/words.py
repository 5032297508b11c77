from __future__ import annotations

import random
from typing import AbstractSet, Dict, Iterable, List, Optional

# ---------------------------
# Word source (offline)
# ---------------------------

CORPUS = [
    "köttur", "hundur", "bók", "hestur", "sól", "vatn", "eyja", "fjall", "ský", "vinur",
    "blóm", "tré", "rós", "stjarna", "tungl", "hús", "borð", "stóll", "gluggi", "hurð",
    "regnbogi", "brauð", "fiskur", "fugl", "strönd", "sjór", "ís", "snjór", "regn", "vindur",
    "þoka", "morgunn", "kvöld", "nótt", "dagur", "sumar", "vetur", "haust", "vor", "hljómsveit",
    "tónlist", "dans", "leikur", "gleði", "ást", "friður", "von", "draumur", "hamingja", "kennari",
    "stokkur", "höfuðborg", "barnabók", "gluggatjöld", "ástarsaga", "málfræði", "manneskja",
    "græðlingur", "sjúkrahús", "tölvuleikur", "aðferðafræði", "menntaskóli", "listrænt",
    "kjallarinn", "kappakstur", "fjallatoppur",
    "gott veður", "fallegt land", "kaldur vindur", "hlýtt í dag", "blátt ský", "grænir dalir",
    "djúpur sjór", "há fjöll", "gulur sandur", "fögur náttúra", "sætur köttur", "stór hestur",
    "lítill fugl", "góður vinur", "falleg rós", "björt stjarna", "hvítur snjór", "rauður bíll",
    "nýtt hús", "gamalt tré", "veðrið er gott", "sólin skín björt", "tunglið er fullt",
    "hafið er blátt", "fjöllin eru há", "ég elska Ísland", "kvöldið er kyrrt",
]

WordPool = Dict[int, List[str]]


def build_pool(corpus: Iterable[str]) -> WordPool:
    """
    Group single-token words by length. Phrases are skipped; the
    catch-line game only ever targets one word at a time.
    """
    pool: WordPool = {}
    for word in corpus:
        if not word or " " in word:
            continue
        pool.setdefault(len(word), []).append(word)
    return pool


def select_word(
    pool: WordPool,
    length: int,
    used_words: AbstractSet[str] = frozenset(),
    rng: Optional[random.Random] = None,
) -> Optional[str]:
    """
    Random word of `length`, preferring ones not in `used_words`.
    Falls back to the full bucket (repeats allowed) once every word there has
    been used. Returns None when no word of that length exists at all.
    """
    rng = rng or random
    words = pool.get(length)
    if not words:
        return None
    fresh = [w for w in words if w not in used_words]
    if fresh:
        return rng.choice(fresh)
    return rng.choice(words)


def available_lengths(pool: WordPool) -> List[int]:
    return sorted(length for length, words in pool.items() if words)


def max_word_length(pool: WordPool) -> int:
    lengths = available_lengths(pool)
    return lengths[-1] if lengths else 3


def closest_length(pool: WordPool, length: int) -> int:
    lengths = available_lengths(pool)
    if not lengths:
        return length
    # ascending scan + strict comparison: ties go to the shorter length
    best = lengths[0]
    for candidate in lengths[1:]:
        if abs(candidate - length) < abs(best - length):
            best = candidate
    return best


def word_counts(pool: WordPool) -> Dict[int, int]:
    return {length: len(words) for length, words in pool.items()}
