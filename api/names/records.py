"""
Plain value types shared by the validator, query builder and repository.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

GENDERS = ("male", "female", "neutral")
NEUTRAL_GENDER = "neutral"
ANY_GENDER = "any"

MAX_COUNT = 50
MAX_NAME_LENGTH = 100
MAX_ORIGIN_LENGTH = 100


@dataclass(frozen=True)
class NameRecord:
    name: str
    gender: str
    origin: str | None = None
    id: int | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class NameQuerySpec:
    gender: str = ANY_GENDER
    count: int = 1
    origin: str | None = None


@dataclass(frozen=True)
class RandomNames:
    names: list[str]
    gender: str
    origin: str | None

    @property
    def count(self) -> int:
        return len(self.names)
