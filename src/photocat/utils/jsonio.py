"""JSON read/write helpers shared by the catalog store and the settings file."""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

from ..errors import CatalogIOError, CatalogParseError

logger = logging.getLogger(__name__)


def read_json(path: Path) -> Any:
    """Return the decoded JSON content of *path*.

    Raises :class:`CatalogIOError` when the file cannot be read and
    :class:`CatalogParseError` when it does not hold valid JSON.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise CatalogParseError(f"Invalid UTF-8 in {path}: {exc}") from exc
    except OSError as exc:
        raise CatalogIOError(f"Cannot read {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogParseError(f"Invalid JSON in {path}: {exc}") from exc


def write_json(path: Path, data: Any, *, indent: int = 2) -> None:
    """Atomically replace *path* with *data* serialised as indented JSON.

    The payload is written to a temporary file in the same directory and then
    moved over the target, so readers never observe a half-written document.
    """

    payload = json.dumps(data, indent=indent, ensure_ascii=False)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(payload)
        # Temporary files are created owner-only; keep the existing mode.
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise CatalogIOError(f"Cannot write {path}: {exc}") from exc
    logger.debug("Wrote %d bytes to %s", len(payload.encode("utf-8")), path)
