"""The stamping pipeline: resolve -> render -> persist, once per invocation."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from verstamp.config.settings import Settings
from verstamp.stamper.manifest import resolve_version
from verstamp.stamper.template import render
from verstamp.stamper.writer import persist
from verstamp.utils.console import print_info, print_step
from verstamp.utils.logging import log_message


@dataclass(frozen=True)
class StampResult:
    """Outcome of one stamping run.

    Attributes:
        version: Version read from the manifest
        path: Artifact location (written, or would-be on a dry run)
        text: Rendered artifact text
        written: False when the run was a dry run
    """

    version: str
    path: Path
    text: str
    written: bool


def stamp(
    root: Path,
    settings: Settings | None = None,
    now: datetime | None = None,
    dry_run: bool = False,
) -> StampResult:
    """Stamp the manifest version under root into the versioned contract.

    A dry run renders without writing and prints no progress, so the
    caller can emit the artifact text alone.

    Raises:
        ConfigReadError: If the settings or the manifest are invalid.
        MissingFieldError: If the manifest has no version.
        WriteError: If the artifact cannot be written.
    """
    settings = settings or Settings()
    settings.validate()
    manifest_path = root / settings.manifest_path
    artifact_path = root / settings.artifact_relpath

    version = resolve_version(manifest_path)
    text = render(version, now or datetime.now(UTC), settings)
    log_message(f"Generated contract version code:\n{text}", level=logging.DEBUG)

    if dry_run:
        return StampResult(version=version, path=artifact_path, text=text, written=False)

    print_step(f"Updating contract version to {version}")
    print_info(f"Writing file to {artifact_path}")
    persist(text, artifact_path)
    return StampResult(version=version, path=artifact_path, text=text, written=True)
