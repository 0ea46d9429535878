"""Shared helpers for strict declarative config validation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def validate_allowed_keys(
    mapping: Mapping[str, Any],
    *,
    field_name: str,
    allowed_keys: Iterable[str],
) -> None:
    """Validate that a mapping only contains allowed keys.

    Parameters
    ----------
    mapping : Mapping[str, Any]
        Configuration mapping to validate.
    field_name : str
        Human-readable path used in error messages.
    allowed_keys : Iterable[str]
        Allowed key names for ``mapping``.

    Raises
    ------
    ValueError
        If unknown keys are present.
    """

    allowed = set(str(key) for key in allowed_keys)
    unknown = sorted(str(key) for key in mapping if str(key) not in allowed)
    if unknown:
        raise ValueError(f"{field_name} has unknown keys: {unknown}")


def validate_choice(value: str, *, field_name: str, choices: Iterable[str]) -> str:
    """Validate that ``value`` is one of ``choices``.

    Raises
    ------
    ValueError
        If ``value`` is not an allowed choice.
    """

    allowed = tuple(choices)
    if value not in allowed:
        raise ValueError(f"Bad value for {field_name}: {value!r}; expected one of {list(allowed)}")
    return value


def validate_non_negative_int(value: Any, *, field_name: str) -> int:
    """Coerce ``value`` to a non-negative integer or raise ``ValueError``."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Bad value for {field_name}: expected an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"Bad value for {field_name}: expected a non-negative integer, got {value}")
    return value


__all__ = ["validate_allowed_keys", "validate_choice", "validate_non_negative_int"]
