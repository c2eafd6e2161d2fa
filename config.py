"""Settings read from the environment (and a local .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from strategy import EASY_RANDOM_RATE, Difficulty


@dataclass
class Settings:
    token: Optional[str]
    difficulty: Difficulty = Difficulty.EASY
    easy_random_rate: float = EASY_RANDOM_RATE
    log_level: str = "INFO"


def parse_difficulty(value: Optional[str]) -> Difficulty:
    """Map ``easy`` / ``hard`` (any case) to a Difficulty. Empty means Easy."""
    if not value:
        return Difficulty.EASY
    try:
        return Difficulty(value.strip().lower())
    except ValueError:
        raise ValueError(f"Unknown difficulty {value!r}, expected 'easy' or 'hard'") from None


def parse_rate(value: Optional[str]) -> float:
    if not value:
        return EASY_RANDOM_RATE
    rate = float(value)
    if not 0.0 <= rate <= 1.0:
        raise ValueError(f"TTT_EASY_RANDOM_RATE must be between 0 and 1, got {rate}")
    return rate


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        token=os.getenv("BOT_TOKEN"),
        difficulty=parse_difficulty(os.getenv("TTT_DIFFICULTY")),
        easy_random_rate=parse_rate(os.getenv("TTT_EASY_RANDOM_RATE")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
