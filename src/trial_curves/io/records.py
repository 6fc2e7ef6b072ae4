"""Decode JSON-encoded trial records stored in single table cells.

One cell holds one trial, e.g.::

    {"sum_presses": 20, "detailed": {"presses": [2, 4, 6, 8], "Xs": [...], "Ls": [...]}}

Older exports spell ``sum_presses`` as ``score`` and ``detailed`` as ``data``;
both spellings are accepted. Unknown keys are ignored.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from trial_curves.core.data import Sample
from trial_curves.core.errors import DecodeError

_SUM_PRESSES_KEYS = ("sum_presses", "score")
_DETAILED_KEYS = ("detailed", "data")

MAX_COUNT = 2**32 - 1


def decode_sample(text: str) -> Sample:
    """Decode one cell's raw text into a :class:`Sample`.

    Parameters
    ----------
    text : str
        Raw cell text.

    Returns
    -------
    Sample
        Decoded sample.

    Raises
    ------
    DecodeError
        If the text is not a JSON object or required fields are missing or
        ill-typed.
    """

    try:
        raw = json.loads(text)
    except (TypeError, ValueError, RecursionError) as exc:
        raise DecodeError(f"cell is not valid JSON: {exc}") from exc
    return sample_from_mapping(raw)


def sample_from_mapping(raw: Any) -> Sample:
    """Build a :class:`Sample` from an already-parsed record mapping."""

    if not isinstance(raw, Mapping):
        raise DecodeError("record must be a JSON object")

    sum_presses = _coerce_count(_first_present(raw, _SUM_PRESSES_KEYS), field_name="sum_presses")
    detailed = _first_present(raw, _DETAILED_KEYS)
    if not isinstance(detailed, Mapping):
        raise DecodeError("detailed must be a JSON object")

    return Sample(
        presses=_coerce_counts(detailed.get("presses"), field_name="detailed.presses"),
        xs=_coerce_counts(detailed.get("Xs"), field_name="detailed.Xs"),
        ls=_coerce_counts(detailed.get("Ls"), field_name="detailed.Ls"),
        sum_presses=sum_presses,
        sum_ls=_coerce_count(raw.get("sum_Ls", 0), field_name="sum_Ls"),
        sum_xs=_coerce_count(raw.get("sum_Xs", 0), field_name="sum_Xs"),
        seconds=_coerce_count(raw.get("seconds", 0), field_name="seconds"),
        color_id=_coerce_count(raw.get("colorId", 0), field_name="colorId"),
    )


def _first_present(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    """Return the value of the first key present, failing when none is."""

    for key in keys:
        if key in raw:
            return raw[key]
    raise DecodeError(f"record is missing required field {keys[0]!r}")


def _coerce_count(value: Any, *, field_name: str) -> int:
    """Validate one non-negative integer field."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"{field_name} must be a non-negative integer")
    if value < 0 or value > MAX_COUNT:
        raise DecodeError(f"{field_name} must be an integer in [0, {MAX_COUNT}]")
    return value


def _coerce_counts(value: Any, *, field_name: str) -> tuple[int, ...]:
    """Validate one array of non-negative integers."""

    if value is None:
        raise DecodeError(f"record is missing required field {field_name!r}")
    if not isinstance(value, list):
        raise DecodeError(f"{field_name} must be an array")
    return tuple(_coerce_count(item, field_name=field_name) for item in value)


__all__ = ["decode_sample", "sample_from_mapping"]
