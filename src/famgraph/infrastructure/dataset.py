"""Load entity datasets from JSON or TOML files.

JSON: a list of member objects, or ``{"members": [...]}``.
TOML: ``[[members]]`` tables.
Each member has ``id``, ``name`` and an optional ``parent_name``
(``parent`` is accepted as an alias).
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from famgraph.domain.entities import Entity
from famgraph.domain.errors import DatasetError

_MEMBERS = TypeAdapter(list[Entity])


def load_entities(path: Path) -> list[Entity]:
    """Read and validate the entity list stored at *path*.

    Raises:
        DatasetError: The file is unreadable, malformed, or fails validation.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetError(f"Cannot read dataset {path}: {exc}") from exc

    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            data: Any = tomllib.loads(raw)
        elif suffix == ".json":
            data = json.loads(raw)
        else:
            raise DatasetError(f"Unsupported dataset format '{suffix}' (use .json or .toml)")
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise DatasetError(f"Invalid {suffix[1:].upper()} in {path}: {exc}") from exc

    if isinstance(data, dict):
        if "members" not in data:
            raise DatasetError(f"Dataset {path} has no 'members' list")
        data = data["members"]

    try:
        return _MEMBERS.validate_python(data)
    except ValidationError as exc:
        raise DatasetError(f"Invalid member records in {path}: {exc}") from exc
