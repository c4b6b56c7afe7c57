from __future__ import annotations

import math
from enum import Enum
from typing import Any, Mapping

REQUIRED_TEXT_FIELDS = ("name", "description", "area", "city", "image")
TEXT_FIELDS = REQUIRED_TEXT_FIELDS + ("cuisine",)
NUMERIC_FIELDS = ("capacity", "rating")
EDITABLE_FIELDS = TEXT_FIELDS + NUMERIC_FIELDS

MIN_RATING = 0.0
MAX_RATING = 5.0


class ValidationMode(str, Enum):
    CREATION = "creation"
    UPDATE = "update"


def parse_number(value: Any) -> float | None:
    """Return a finite float for ints, floats and numeric strings; None for anything else."""
    if isinstance(value, bool):  # bool is subclass of int in Python
        return None
    if isinstance(value, (int, float)):
        try:
            n = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str) and value.strip() != "":
        try:
            n = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return n if math.isfinite(n) else None


def parse_capacity(value: Any) -> int | None:
    n = parse_number(value)
    if n is None or not n.is_integer() or n <= 0:
        return None
    return int(n)


def parse_rating(value: Any) -> float | None:
    n = parse_number(value)
    if n is None or not (MIN_RATING <= n <= MAX_RATING):
        return None
    return n


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validation_errors(candidate: Any, mode: ValidationMode = ValidationMode.CREATION) -> list[str]:
    """
    Check a candidate restaurant payload and return the reasons it is invalid (empty when valid).

    Creation mode requires every field in REQUIRED_TEXT_FIELDS. In both modes each field
    present on the candidate must have the right type and range; absent fields are not checked.
    """
    if not isinstance(candidate, Mapping):
        return ["restaurant must be a JSON object"]

    mode = ValidationMode(mode)
    errors: list[str] = []

    if mode is ValidationMode.CREATION:
        missing = [f for f in REQUIRED_TEXT_FIELDS if _is_blank(candidate.get(f))]
        if missing:
            errors.append(f"missing required field(s): {', '.join(missing)}")

    for field in TEXT_FIELDS:
        if field not in candidate:
            continue
        value = candidate[field]
        if value is None:
            # Required fields can't be cleared by an update; creation already reported them missing.
            if mode is ValidationMode.UPDATE and field in REQUIRED_TEXT_FIELDS:
                errors.append(f"{field} cannot be null")
            continue
        if not isinstance(value, str):
            errors.append(f"{field} must be a string")

    capacity = candidate.get("capacity")
    if capacity is not None and parse_capacity(capacity) is None:
        errors.append("capacity must be a whole number greater than 0")

    rating = candidate.get("rating")
    if rating is not None:
        n = parse_number(rating)
        if n is None or not (MIN_RATING <= n <= MAX_RATING):
            errors.append(f"rating must be a number between {MIN_RATING:g} and {MAX_RATING:g}")

    return errors


def validate(candidate: Any, mode: ValidationMode = ValidationMode.CREATION) -> bool:
    return not validation_errors(candidate, mode)
