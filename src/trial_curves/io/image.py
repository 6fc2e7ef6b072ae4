"""Write data-URL encoded chart images to disk."""

from __future__ import annotations

import base64
import binascii
from pathlib import Path

from trial_curves.core.errors import EncodingError, FileWriteError
from trial_curves.utils.logging import get_logger

logger = get_logger(__name__)


def decode_data_url(image: str) -> bytes:
    """Decode the base64 payload of a data URL.

    Parameters
    ----------
    image : str
        Data URL such as ``data:image/png;base64,iVBORw0...``. The payload is
        the text between the first and second comma.

    Returns
    -------
    bytes
        Decoded payload.

    Raises
    ------
    EncodingError
        If there is no comma-separated payload or it is not valid base64.
    """

    parts = image.split(",")
    if len(parts) < 2:
        raise EncodingError("invalid image: missing comma-separated data payload")
    try:
        return base64.b64decode(parts[1], validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EncodingError(f"invalid image: payload is not valid base64 ({exc})") from exc


def save_image(path: str | Path, image: str) -> Path:
    """Decode a data URL and write the bytes verbatim to ``path``.

    Parameters
    ----------
    path : str | pathlib.Path
        Destination file. Its parent directory must exist.
    image : str
        Data URL holding a base64 payload.

    Returns
    -------
    pathlib.Path
        Output path.

    Raises
    ------
    EncodingError
        If the payload is malformed.
    FileWriteError
        If the file cannot be written.
    """

    payload = decode_data_url(image)
    output_path = Path(path)
    try:
        output_path.write_bytes(payload)
    except OSError as exc:
        raise FileWriteError(f"cannot write image {output_path}: {exc}") from exc
    logger.info("saved image (%d bytes) to %s", len(payload), output_path)
    return output_path


__all__ = ["decode_data_url", "save_image"]
