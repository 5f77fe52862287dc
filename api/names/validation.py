"""
Inbound parameter checks.

Raw query/body values go in, normalized records come out. Nothing here
touches the database, so a rejected request never reaches the pool.
"""

from __future__ import annotations

import re

from .errors import ValidationError
from .records import (
    ANY_GENDER,
    GENDERS,
    MAX_COUNT,
    MAX_NAME_LENGTH,
    MAX_ORIGIN_LENGTH,
    NameQuerySpec,
    NameRecord,
)

QUERY_GENDERS = (*GENDERS, ANY_GENDER)

# ASCII decimal digits with an optional minus sign.
_COUNT_PATTERN = re.compile(r"-?[0-9]+")


def _normalize_origin(origin: str | None) -> str | None:
    value = (origin or "").strip()
    if not value:
        return None
    if len(value) > MAX_ORIGIN_LENGTH:
        raise ValidationError(f"Origin must be at most {MAX_ORIGIN_LENGTH} characters.")
    return value


def _parse_count(count: str | int | None) -> int:
    if count is None or (isinstance(count, str) and not count.strip()):
        return 1
    if isinstance(count, bool):
        raise ValidationError("Count must be an integer.")
    if isinstance(count, str):
        raw = count.strip()
        if not _COUNT_PATTERN.fullmatch(raw):
            raise ValidationError("Count must be an integer.")
        value = int(raw)
    elif isinstance(count, int):
        value = count
    else:
        raise ValidationError("Count must be an integer.")
    if value < 1:
        raise ValidationError("Count must be at least 1.")
    if value > MAX_COUNT:
        raise ValidationError(f"Count cannot exceed {MAX_COUNT}.")
    return value


def validate_query(
    gender: str | None = None,
    count: str | int | None = None,
    origin: str | None = None,
) -> NameQuerySpec:
    gender_value = (gender or "").strip().lower() or ANY_GENDER
    if gender_value not in QUERY_GENDERS:
        raise ValidationError(f"Gender must be one of: {', '.join(QUERY_GENDERS)}.")

    return NameQuerySpec(
        gender=gender_value,
        count=_parse_count(count),
        origin=_normalize_origin(origin),
    )


def validate_new_name(name: str | None, gender: str | None, origin: str | None = None) -> NameRecord:
    name_value = (name or "").strip()
    gender_value = (gender or "").strip().lower()
    if not name_value or not gender_value:
        raise ValidationError("Name and gender are required.")
    if len(name_value) > MAX_NAME_LENGTH:
        raise ValidationError(f"Name must be at most {MAX_NAME_LENGTH} characters.")
    if gender_value not in GENDERS:
        raise ValidationError(f"Gender must be one of: {', '.join(GENDERS)}.")

    return NameRecord(name=name_value, gender=gender_value, origin=_normalize_origin(origin))
