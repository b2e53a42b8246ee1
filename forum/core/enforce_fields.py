"""Required Field Enforcement — presence checks applied before any store write.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - A field is missing when it is None or an empty / whitespace-only string
    - Values are never altered here (no sanitization beyond presence)
    - Field names in messages use the wire (camelCase) names

Design Decisions:
    - Raises ValidationError instead of returning an error dict: handlers are plain
      request/response code, the global error handler owns serialization
"""

from collections.abc import Mapping

from forum.core.errors import ValidationError


def is_missing(value: object) -> bool:
    """True for None and blank strings. False, 0 and other falsy values count as present."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(values: Mapping[str, object]) -> list[str]:
    """Names of missing fields, in the order given."""
    return [name for name, value in values.items() if is_missing(value)]


def check_required(entity: str, values: Mapping[str, object]) -> None:
    """Raise ValidationError naming every missing field of `entity`."""
    missing = missing_fields(values)
    if missing:
        raise ValidationError(
            f"{entity} validation failed: "
            + ", ".join(f"{name} is required" for name in missing),
            fields=missing,
        )
