from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Dict, Mapping, Optional

CONFIG_PATH = Path(__file__).resolve().parent / "letter_racer.config.json"

FRAME_WIDTH = 50
STARTING_WORD_LENGTH = 3

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config(path: Optional[Path] = None) -> Dict[str, object]:
    path = path or CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        # corrupt config: run with defaults
        return {}
    return data if isinstance(data, dict) else {}


@dataclass(frozen=True)
class SessionConfig:
    """Read once when the session is composed; never consulted as global state."""
    tick_interval: float = 0.6
    duration: Optional[float] = None
    adaptive_difficulty: bool = True
    show_completion_screens: bool = True
    show_progression_screens: bool = True
    starting_word_length: int = STARTING_WORD_LENGTH
    fallback_word: str = "bók"
    auto_type_interval: float = 0.25
    sound: bool = True
    theme: str = "slate"
    themes: Dict[str, Dict[str, str]] = field(default_factory=dict)
    log_level: str = "WARNING"

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "SessionConfig":
        defaults = cls()
        values: Dict[str, object] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            default = getattr(defaults, f.name)
            try:
                values[f.name] = _coerce(f.name, data[f.name], default)
            except (TypeError, ValueError):
                logging.getLogger(__name__).warning(
                    "Ignoring bad config value %s=%r", f.name, data[f.name]
                )
        return replace(defaults, **values)

    @classmethod
    def demo(cls) -> "SessionConfig":
        return cls(
            tick_interval=0.5,
            duration=18.0,
            adaptive_difficulty=False,
            show_completion_screens=False,
            show_progression_screens=False,
            sound=False,
        )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)


def _coerce(name: str, value: object, default: object) -> object:
    if name == "duration":
        if value is None:
            return None
        seconds = float(value)  # type: ignore[arg-type]
        if seconds <= 0:
            raise ValueError(name)
        return seconds
    if name == "themes":
        if not isinstance(value, dict):
            raise TypeError(name)
        return {k: dict(v) for k, v in value.items() if isinstance(v, dict)}
    if name == "log_level":
        level = str(value).upper()
        if level not in LOG_LEVELS:
            raise ValueError(name)
        return level
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise TypeError(name)
        return value
    if isinstance(default, int):
        number = int(value)  # type: ignore[arg-type]
        if number < 1:
            raise ValueError(name)
        return number
    if isinstance(default, float):
        number = float(value)  # type: ignore[arg-type]
        if number <= 0:
            raise ValueError(name)
        return number
    text = str(value)
    if not text:
        raise ValueError(name)
    return text
