"""Schema helpers for the photocat settings file."""

from __future__ import annotations

import os
from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import ALBUMS_FILE_NAME, DEFAULT_LOG_LEVEL, PHOTOS_FILE_NAME

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "photocat/settings.schema.json",
    "type": "object",
    "required": ["schema", "photos_file", "albums_file", "log_level"],
    "properties": {
        "schema": {"const": "photocat/settings@1"},
        "data_dir": {"type": ["string", "null"]},
        "photos_file": {"type": "string", "minLength": 1},
        "albums_file": {"type": "string", "minLength": 1},
        "log_level": {
            "type": "string",
            "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "photocat/settings@1",
    "data_dir": None,
    "photos_file": PHOTOS_FILE_NAME,
    "albums_file": ALBUMS_FILE_NAME,
    "log_level": DEFAULT_LOG_LEVEL,
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "data_dir":
                # Wrong types fall through to the schema, which rejects them.
                if isinstance(value, os.PathLike):
                    value = os.fspath(value)
                merged[key] = None if value == "" else value
                continue
            if key == "log_level" and isinstance(value, str):
                merged[key] = value.upper()
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults"]
