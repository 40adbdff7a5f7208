"""Version resolution from a package manifest.

Supports JSON manifests (package.json and friends, top-level ``version``)
and TOML manifests (pyproject.toml: ``[project].version``, falling back to
``[tool.poetry].version``). The format is chosen by file suffix.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from verstamp.config.settings import UNSAFE_LITERAL_CHARS
from verstamp.utils.errors import ConfigReadError, MissingFieldError
from verstamp.utils.logging import log_message

logger = logging.getLogger(__name__)

VERSION_FIELD = "version"


def _read_manifest(manifest_path: Path) -> str:
    try:
        with manifest_path.open(encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        raise ConfigReadError(f"Manifest not found: {manifest_path}", path=manifest_path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(
            f"Cannot read manifest {manifest_path}: {e}", path=manifest_path
        ) from e


def _parse_manifest(manifest_path: Path, content: str) -> dict[str, Any]:
    try:
        if manifest_path.suffix == ".toml":
            data = tomllib.loads(content)
        else:
            data = json.loads(content)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigReadError(
            f"Malformed manifest {manifest_path}: {e}", path=manifest_path
        ) from e

    if not isinstance(data, dict):
        raise ConfigReadError(
            f"Malformed manifest {manifest_path}: expected an object at the top level",
            path=manifest_path,
        )
    return data


def _extract_version(manifest_path: Path, data: dict[str, Any]) -> Any:
    if manifest_path.suffix != ".toml":
        return data.get(VERSION_FIELD)

    for table_path in (("project",), ("tool", "poetry")):
        table: Any = data
        for name in table_path:
            table = table.get(name) if isinstance(table, dict) else None
        if isinstance(table, dict) and VERSION_FIELD in table:
            return table[VERSION_FIELD]
    return None


def resolve_version(manifest_path: Path) -> str:
    """Read a manifest and return its declared version, exactly as written.

    The value is not normalized: "0.0.1-beta" comes back as "0.0.1-beta".

    Raises:
        ConfigReadError: If the manifest is missing, unreadable or malformed,
            or the version is not a string that can be embedded as a literal.
        MissingFieldError: If the manifest declares no (or an empty) version.
    """
    content = _read_manifest(manifest_path)
    data = _parse_manifest(manifest_path, content)
    version = _extract_version(manifest_path, data)

    if version is None or version == "":
        raise MissingFieldError(VERSION_FIELD, path=manifest_path)

    if not isinstance(version, str):
        raise ConfigReadError(
            f"Malformed manifest {manifest_path}: '{VERSION_FIELD}' must be a string, "
            f"got {type(version).__name__}",
            path=manifest_path,
        )

    if UNSAFE_LITERAL_CHARS.search(version):
        raise ConfigReadError(
            f"Malformed manifest {manifest_path}: '{VERSION_FIELD}' {version!r} "
            "contains characters that cannot be embedded in a string literal",
            path=manifest_path,
        )

    log_message(f"Resolved version {version} from {manifest_path}")
    return version
