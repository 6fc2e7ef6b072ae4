"""Command dispatch boundary for the plotting front end.

The front end invokes commands by name with a mapping of arguments and
receives either ``{"ok": True, "result": ...}`` or
``{"ok": False, "error": {"kind": ..., "message": ...}}``. Argument keys may
use snake_case or camelCase.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from trial_curves.aggregation.config import curve_configs_from_sequence
from trial_curves.aggregation.coordinator import aggregate
from trial_curves.aggregation.serialization import curve_stats_payload
from trial_curves.core.config_validation import pick_aliased, validate_allowed_keys
from trial_curves.core.errors import InvalidConfiguration, TrialCurvesError, error_payload
from trial_curves.io.image import save_image
from trial_curves.io.tabular import read_table_header
from trial_curves.utils.logging import get_logger

logger = get_logger(__name__)


async def get_header(args: Mapping[str, Any]) -> list[str]:
    """Return the header names of the table at ``path``."""

    path = _require_arg(args, "get_header", keys=("path",))
    return await asyncio.to_thread(read_table_header, str(path))


async def get_data(args: Mapping[str, Any]) -> list[list[dict[str, float]]]:
    """Aggregate the table at ``path`` for the requested curve configs."""

    path = _require_arg(args, "get_data", keys=("path",))
    raw_curves = _require_arg(args, "get_data", keys=("curve_configs", "curveConfigs"))
    curves = curve_configs_from_sequence(raw_curves, field_name="curve_configs")
    results = await aggregate(str(path), curves)
    return curve_stats_payload(results)


async def save_image_command(args: Mapping[str, Any]) -> None:
    """Write the data-URL ``image`` to ``path``."""

    path = _require_arg(args, "save_image", keys=("path",))
    image = _require_arg(args, "save_image", keys=("image",))
    if not isinstance(image, str):
        raise InvalidConfiguration("save_image: image must be a string")
    await asyncio.to_thread(save_image, str(path), image)


COMMANDS: dict[str, Callable[[Mapping[str, Any]], Awaitable[Any]]] = {
    "get_header": get_header,
    "get_data": get_data,
    "save_image": save_image_command,
}

_COMMAND_KEYS: dict[str, tuple[str, ...]] = {
    "get_header": ("path",),
    "get_data": ("path", "curve_configs", "curveConfigs"),
    "save_image": ("path", "image"),
}


async def invoke(command: str, args: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Dispatch one command and wrap its outcome.

    Parameters
    ----------
    command : str
        Command name, one of :data:`COMMANDS`.
    args : Mapping[str, Any] | None, optional
        Command arguments.

    Returns
    -------
    dict[str, Any]
        ``{"ok": True, "result": ...}`` on success, otherwise
        ``{"ok": False, "error": {"kind": ..., "message": ...}}``.
    """

    arguments: Mapping[str, Any] = {} if args is None else args
    try:
        handler = COMMANDS.get(command)
        if handler is None:
            raise InvalidConfiguration(
                f"unknown command {command!r}; expected one of {sorted(COMMANDS)}"
            )
        if not isinstance(arguments, Mapping):
            raise InvalidConfiguration(f"{command}: arguments must be an object")
        validate_allowed_keys(arguments, field_name=command, allowed_keys=_COMMAND_KEYS[command])
        result = await handler(arguments)
    except TrialCurvesError as exc:
        logger.warning("command %s failed [%s]: %s", command, exc.kind, exc.message)
        return {"ok": False, "error": error_payload(exc)}
    except Exception as exc:
        logger.exception("command %s failed unexpectedly", command)
        return {"ok": False, "error": error_payload(exc)}
    return {"ok": True, "result": result}


def invoke_sync(command: str, args: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Run :func:`invoke` to completion outside an event loop."""

    return asyncio.run(invoke(command, args))


def _require_arg(args: Mapping[str, Any], command: str, *, keys: tuple[str, ...]) -> Any:
    """Return a required argument, accepting equivalent spellings."""

    value = pick_aliased(args, field_name=command, keys=keys)
    if value is None:
        raise InvalidConfiguration(f"{command} is missing required argument {keys[0]!r}")
    return value


__all__ = ["COMMANDS", "get_data", "get_header", "invoke", "invoke_sync", "save_image_command"]
