"""Shared helpers for strict declarative config validation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .errors import InvalidConfiguration


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
    InvalidConfiguration
        If unknown keys are present.
    """

    allowed = set(str(key) for key in allowed_keys)
    unknown = sorted(str(key) for key in mapping if str(key) not in allowed)
    if unknown:
        raise InvalidConfiguration(f"{field_name} has unknown keys: {unknown}")


def validate_required_keys(
    mapping: Mapping[str, Any],
    *,
    field_name: str,
    required_keys: Iterable[str],
) -> None:
    """Validate that required keys are present in a mapping.

    Parameters
    ----------
    mapping : Mapping[str, Any]
        Configuration mapping to validate.
    field_name : str
        Human-readable path used in error messages.
    required_keys : Iterable[str]
        Keys that must be present in ``mapping``.

    Raises
    ------
    InvalidConfiguration
        If required keys are missing.
    """

    required = set(str(key) for key in required_keys)
    missing = sorted(key for key in required if key not in mapping)
    if missing:
        raise InvalidConfiguration(f"{field_name} is missing required keys: {missing}")


def pick_aliased(
    mapping: Mapping[str, Any],
    *,
    field_name: str,
    keys: tuple[str, ...],
    default: Any = None,
) -> Any:
    """Return the value stored under one of several equivalent keys.

    Parameters
    ----------
    mapping : Mapping[str, Any]
        Configuration mapping.
    field_name : str
        Human-readable path used in error messages.
    keys : tuple[str, ...]
        Equivalent spellings of one key (e.g. ``("max_length", "maxLength")``).
    default : Any, optional
        Value returned when no spelling is present.

    Raises
    ------
    InvalidConfiguration
        If more than one spelling is present.
    """

    present = [key for key in keys if key in mapping]
    if len(present) > 1:
        raise InvalidConfiguration(f"{field_name} sets the same key more than once: {present}")
    if not present:
        return default
    return mapping[present[0]]


__all__ = ["pick_aliased", "validate_allowed_keys", "validate_required_keys"]
