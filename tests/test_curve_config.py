"""Tests for curve configuration parsing and config file loading."""

from __future__ import annotations

import json

import pytest

from trial_curves.aggregation import (
    curve_config_from_mapping,
    curve_configs_from_mapping,
    load_curve_configs,
    parse_curve_spec,
)
from trial_curves.core import load_config_mapping
from trial_curves.core.data import CurveConfig
from trial_curves.core.errors import InvalidConfiguration


def test_curve_config_from_mapping_accepts_both_spellings() -> None:
    """snake_case and camelCase keys should build the same curve."""

    snake = curve_config_from_mapping({"column_id": 2, "unit": 5, "max_length": 60})
    camel = curve_config_from_mapping({"columnId": 2, "unit": 5, "maxLength": 60})

    assert snake == camel == CurveConfig(column_id=2, unit=5, max_length=60)


def test_curve_config_from_mapping_applies_defaults() -> None:
    """unit defaults to 1, max_length to 0 and short_samples to error."""

    curve = curve_config_from_mapping({"column_id": 0})

    assert curve.unit == 1
    assert curve.max_length == 0
    assert curve.short_samples == "error"


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ({"unit": 2}, "missing required keys"),
        ({"column_id": 1, "colour": 3}, "unknown keys"),
        ({"column_id": 1, "columnId": 1}, "same key more than once"),
        ({"column_id": -1}, "column_id must be a non-negative integer"),
        ({"column_id": 1, "unit": 0}, "unit must be an integer >= 1"),
        ({"column_id": 1, "max_length": -3}, "max_length must be a non-negative integer"),
        ({"column_id": 1, "unit": 1.5}, "must be an integer"),
        ({"column_id": True}, "must be an integer"),
        ({"column_id": 1, "short_samples": "ignore"}, "short_samples must be one of"),
        ([1, 2], "must be an object"),
    ],
)
def test_curve_config_from_mapping_rejects_invalid_values(raw, message: str) -> None:
    """Invalid curve mappings should raise InvalidConfiguration."""

    with pytest.raises(InvalidConfiguration, match=message):
        curve_config_from_mapping(raw)


def test_curve_configs_from_mapping_requires_non_empty_curves() -> None:
    """Config root must hold a non-empty curves list and nothing else."""

    with pytest.raises(InvalidConfiguration, match="no curve is requested"):
        curve_configs_from_mapping({"curves": []})
    with pytest.raises(InvalidConfiguration, match="missing required keys"):
        curve_configs_from_mapping({})
    with pytest.raises(InvalidConfiguration, match="unknown keys"):
        curve_configs_from_mapping({"curves": [{"column_id": 0}], "title": "x"})
    with pytest.raises(InvalidConfiguration, match="must be a list"):
        curve_configs_from_mapping({"curves": "0"})


def test_load_curve_configs_reads_yaml_and_json(tmp_path) -> None:
    """Curve configs should load from YAML and JSON files alike."""

    yaml_path = tmp_path / "curves.yaml"
    yaml_path.write_text(
        "curves:\n  - column_id: 1\n    unit: 2\n  - columnId: 3\n    maxLength: 10\n",
        encoding="utf-8",
    )
    json_path = tmp_path / "curves.json"
    json_path.write_text(
        json.dumps({"curves": [{"column_id": 1, "unit": 2}, {"columnId": 3, "maxLength": 10}]}),
        encoding="utf-8",
    )

    expected = (CurveConfig(column_id=1, unit=2), CurveConfig(column_id=3, max_length=10))
    assert load_curve_configs(yaml_path) == expected
    assert load_curve_configs(json_path) == expected


def test_load_config_mapping_rejects_bad_files(tmp_path) -> None:
    """Loader should reject unknown suffixes, parse errors and non-mapping roots."""

    toml_path = tmp_path / "config.toml"
    toml_path.write_text("a = 1\n", encoding="utf-8")
    with pytest.raises(InvalidConfiguration, match="unsupported config file extension"):
        load_config_mapping(toml_path)

    broken = tmp_path / "config.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidConfiguration, match="could not be parsed"):
        load_config_mapping(broken)

    listing = tmp_path / "list.yaml"
    listing.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(InvalidConfiguration, match="config root must be a JSON/YAML object"):
        load_config_mapping(listing)


def test_parse_curve_spec() -> None:
    """Compact CLI specs should map to column, unit and max length."""

    assert parse_curve_spec("3") == CurveConfig(column_id=3)
    assert parse_curve_spec("3:5") == CurveConfig(column_id=3, unit=5)
    assert parse_curve_spec("3:5:60") == CurveConfig(column_id=3, unit=5, max_length=60)

    for bad in ("", "a", "1:2:3:4", "1::2", "1:0"):
        with pytest.raises(InvalidConfiguration):
            parse_curve_spec(bad)
