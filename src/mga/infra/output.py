"""Result output: JSON to standard output or to a private file.

Encoding and OS failures are wrapped into
:class:`~mga.exceptions.EncodingError` and
:class:`~mga.exceptions.OutputError` here, at the infrastructure
boundary.  A failed file write may leave a truncated file behind.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timedelta
from typing import Any

from mga.core.models import FilePath
from mga.core.protocols import JsonSerializable
from mga.exceptions import EncodingError, OutputError

FILE_MODE = 0o600
"""Owner read/write only."""


def _json_default(obj: Any) -> Any:
    if isinstance(obj, datetime):
        if obj.utcoffset() == timedelta(0):
            return obj.strftime("%Y-%m-%dT%H:%M:%SZ")
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode_result(result: JsonSerializable) -> str:
    """Serialise *result* as two-space indented JSON.

    Raises
    ------
    EncodingError
        If *result* has no ``to_dict`` or contains unserialisable values.
    """
    to_dict = getattr(result, "to_dict", None)
    if not callable(to_dict):
        raise EncodingError(
            f"result of type {type(result).__name__} cannot be serialised to JSON",
        )
    try:
        return json.dumps(to_dict(), indent=2, ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"failed to encode result: {exc}") from exc


def write_output(
    logger: logging.Logger,
    file_path: FilePath,
    result: JsonSerializable,
) -> None:
    """Write *result* to *file_path*, or to stdout when the path is empty.

    The payload is always followed by exactly one newline.  Files are
    created or truncated with mode ``0o600``.
    """
    data = encode_result(result) + "\n"

    if not file_path:
        try:
            sys.stdout.write(data)
            sys.stdout.flush()
        except OSError as exc:
            raise OutputError(f"failed to write output to stdout: {exc}") from exc
        return

    logger.info("Writing output to file", extra={"path": str(file_path)})
    try:
        fd = os.open(file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(data)
    except OSError as exc:
        raise OutputError(
            f"failed to write output to {file_path}: {exc}",
            hint="Check that the directory exists and is writable.",
        ) from exc
