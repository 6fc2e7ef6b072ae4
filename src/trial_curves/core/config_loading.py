"""Load declarative curve configuration files for the CLI and scripts.

The loader supports JSON and YAML mappings with strict root-type validation.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import InvalidConfiguration

SUPPORTED_CONFIG_SUFFIXES: tuple[str, ...] = (".json", ".yaml", ".yml")


def load_config_mapping(path: str | Path) -> dict[str, Any]:
    """Load one JSON/YAML config file whose root is an object mapping.

    Parameters
    ----------
    path : str | pathlib.Path
        Config file path. Supported suffixes are `.json`, `.yaml`, and `.yml`.

    Returns
    -------
    dict[str, Any]
        Parsed config mapping.

    Raises
    ------
    InvalidConfiguration
        If the suffix is unsupported, the file does not parse, or the config
        root is not an object mapping.
    """

    config_path = Path(path)
    suffix = config_path.suffix.lower()

    if suffix not in SUPPORTED_CONFIG_SUFFIXES:
        supported = ", ".join(SUPPORTED_CONFIG_SUFFIXES)
        raise InvalidConfiguration(
            f"unsupported config file extension {suffix!r}; expected one of {supported}"
        )

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            if suffix == ".json":
                raw = json.load(handle)
            else:
                raw = yaml.safe_load(handle)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise InvalidConfiguration(f"config file {config_path} could not be parsed: {exc}") from exc

    if not isinstance(raw, dict):
        raise InvalidConfiguration("config root must be a JSON/YAML object")
    return raw


__all__ = ["SUPPORTED_CONFIG_SUFFIXES", "load_config_mapping"]
