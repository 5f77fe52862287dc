"""
Structured random-name query.

A `NameQuery` holds filter values; `render()` emits SQL text that contains
only structure and `$n` placeholders, with the values returned separately
as positional args for asyncpg. No caller-supplied value is ever formatted
into the statement text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .records import ANY_GENDER, NEUTRAL_GENDER, NameQuerySpec

TABLE = "fantasy_names"


class _Params:
    def __init__(self) -> None:
        self.args: list[Any] = []

    def bind(self, value: Any) -> str:
        self.args.append(value)
        return f"${len(self.args)}"


@dataclass(frozen=True)
class NameQuery:
    limit: int
    gender: str | None = None
    origin: str | None = None

    @classmethod
    def from_spec(cls, spec: NameQuerySpec) -> NameQuery:
        gender = None if spec.gender == ANY_GENDER else spec.gender
        return cls(limit=spec.count, gender=gender, origin=spec.origin)

    def render(self) -> tuple[str, list[Any]]:
        params = _Params()
        conditions: list[str] = []

        if self.gender is not None:
            # Neutral names are eligible for every gender-specific request.
            conditions.append(f"(gender = {params.bind(self.gender)} OR gender = {params.bind(NEUTRAL_GENDER)})")
        if self.origin is not None:
            conditions.append(f"origin = {params.bind(self.origin)}")

        lines = [f"SELECT name FROM {TABLE}"]
        if conditions:
            lines.append("WHERE " + "\n  AND ".join(conditions))
        lines.append("ORDER BY random()")
        lines.append(f"LIMIT {params.bind(self.limit)}")
        return "\n".join(lines), params.args
