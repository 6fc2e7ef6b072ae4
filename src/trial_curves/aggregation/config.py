"""Build curve configurations from declarative mappings.

A curve config file looks like::

    curves:
      - column_id: 3
        unit: 5
        max_length: 60
      - columnId: 4
        unit: 5

``column_id``/``max_length`` may also be spelled ``columnId``/``maxLength``,
matching the payloads sent by the plotting front end.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from trial_curves.core import load_config_mapping
from trial_curves.core.config_validation import (
    pick_aliased,
    validate_allowed_keys,
    validate_required_keys,
)
from trial_curves.core.data import CurveConfig
from trial_curves.core.errors import InvalidConfiguration

_CURVE_KEYS = ("column_id", "columnId", "unit", "max_length", "maxLength", "short_samples", "shortSamples")


def curve_config_from_mapping(raw: Any, *, field_name: str = "curve") -> CurveConfig:
    """Parse one curve mapping into :class:`CurveConfig`.

    Parameters
    ----------
    raw : Any
        Curve mapping with ``column_id`` and optional ``unit``,
        ``max_length`` and ``short_samples``.
    field_name : str, optional
        Human-readable path used in error messages.

    Returns
    -------
    CurveConfig
        Parsed curve configuration.

    Raises
    ------
    InvalidConfiguration
        If the mapping has unknown keys, lacks a column id, or holds
        out-of-range values.
    """

    if not isinstance(raw, Mapping):
        raise InvalidConfiguration(f"{field_name} must be an object")
    validate_allowed_keys(raw, field_name=field_name, allowed_keys=_CURVE_KEYS)

    column_id = pick_aliased(raw, field_name=field_name, keys=("column_id", "columnId"))
    if column_id is None:
        raise InvalidConfiguration(f"{field_name} is missing required keys: ['column_id']")

    return CurveConfig(
        column_id=_coerce_int(column_id, field_name=f"{field_name}.column_id"),
        unit=_coerce_int(raw.get("unit", 1), field_name=f"{field_name}.unit"),
        max_length=_coerce_int(
            pick_aliased(raw, field_name=field_name, keys=("max_length", "maxLength"), default=0),
            field_name=f"{field_name}.max_length",
        ),
        short_samples=str(
            pick_aliased(raw, field_name=field_name, keys=("short_samples", "shortSamples"), default="error")
        ),
    )


def curve_configs_from_sequence(raw: Any, *, field_name: str = "curves") -> tuple[CurveConfig, ...]:
    """Parse a list of curve mappings, requiring at least one curve."""

    if not isinstance(raw, Sequence) or isinstance(raw, (str, bytes)):
        raise InvalidConfiguration(f"{field_name} must be a list of curve objects")
    if len(raw) == 0:
        raise InvalidConfiguration("no curve is requested")
    return tuple(
        curve_config_from_mapping(item, field_name=f"{field_name}[{index}]")
        for index, item in enumerate(raw)
    )


def curve_configs_from_mapping(config: Mapping[str, Any]) -> tuple[CurveConfig, ...]:
    """Parse a config mapping whose ``curves`` key lists the curves.

    Parameters
    ----------
    config : Mapping[str, Any]
        Config root mapping.

    Returns
    -------
    tuple[CurveConfig, ...]
        Parsed curves in config order.
    """

    validate_allowed_keys(config, field_name="config", allowed_keys=("curves",))
    validate_required_keys(config, field_name="config", required_keys=("curves",))
    return curve_configs_from_sequence(config["curves"])


def load_curve_configs(path: str | Path) -> tuple[CurveConfig, ...]:
    """Load curves from a JSON/YAML config file."""

    return curve_configs_from_mapping(load_config_mapping(path))


def parse_curve_spec(spec: str) -> CurveConfig:
    """Parse the compact ``COLUMN[:UNIT[:MAX_LENGTH]]`` form used by the CLI.

    Examples
    --------
    >>> parse_curve_spec("3:5:60")
    CurveConfig(column_id=3, unit=5, max_length=60, short_samples='error')
    """

    parts = spec.split(":")
    if not 1 <= len(parts) <= 3 or any(not part.strip() for part in parts):
        raise InvalidConfiguration(f"curve spec {spec!r} must look like COLUMN[:UNIT[:MAX_LENGTH]]")
    values = [_coerce_int(part.strip(), field_name=f"curve spec {spec!r}") for part in parts]
    return CurveConfig(*values)


def _coerce_int(raw: Any, *, field_name: str) -> int:
    """Coerce one integer field, rejecting booleans and fractional values."""

    if isinstance(raw, bool):
        raise InvalidConfiguration(f"{field_name} must be an integer")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise InvalidConfiguration(f"{field_name} must be an integer") from exc
    raise InvalidConfiguration(f"{field_name} must be an integer")


__all__ = [
    "curve_config_from_mapping",
    "curve_configs_from_mapping",
    "curve_configs_from_sequence",
    "load_curve_configs",
    "parse_curve_spec",
]
