"""Error taxonomy shared by the table reader, aggregator and command boundary.

Every library error carries a short ``kind`` tag so the command boundary can
report failures as one ``{"kind": ..., "message": ...}`` value.
"""

from __future__ import annotations

from typing import Any


class TrialCurvesError(Exception):
    """Base class for all ``trial_curves`` errors."""

    kind: str = "error"

    @property
    def message(self) -> str:
        """Return the human-readable error message."""

        return str(self.args[0]) if self.args else self.kind


class TableReadError(TrialCurvesError, OSError):
    """Table source could not be opened or is malformed at the row/file level."""

    kind = "table_read"


class DecodeError(TrialCurvesError, ValueError):
    """One table cell does not hold a valid sample record."""

    kind = "decode"


class InvalidConfiguration(TrialCurvesError, ValueError):
    """Request cannot be satisfied with the given curves and data."""

    kind = "invalid_configuration"


class EncodingError(TrialCurvesError, ValueError):
    """Image payload is malformed or not valid base64."""

    kind = "encoding"


class FileWriteError(TrialCurvesError, OSError):
    """Output file could not be written."""

    kind = "io"


def error_payload(exc: BaseException) -> dict[str, Any]:
    """Convert an exception into the tagged error value used at the boundary.

    Parameters
    ----------
    exc : BaseException
        Raised error. Library errors keep their ``kind``; anything else is
        reported with kind ``"internal"``.

    Returns
    -------
    dict[str, Any]
        Mapping with ``kind`` and ``message`` keys.
    """

    if isinstance(exc, TrialCurvesError):
        return {"kind": exc.kind, "message": exc.message}
    return {"kind": "internal", "message": f"{type(exc).__name__}: {exc}"}


__all__ = [
    "DecodeError",
    "EncodingError",
    "FileWriteError",
    "InvalidConfiguration",
    "TableReadError",
    "TrialCurvesError",
    "error_payload",
]
