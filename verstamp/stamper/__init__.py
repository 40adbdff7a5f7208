"""Version stamping: manifest reading, template rendering, artifact writing."""

from verstamp.stamper.manifest import VERSION_FIELD, resolve_version
from verstamp.stamper.pipeline import StampResult, stamp
from verstamp.stamper.template import (
    ARTIFACT_TEMPLATE,
    format_timestamp,
    render,
    strip_timestamp,
)
from verstamp.stamper.writer import persist

__all__ = [
    "VERSION_FIELD",
    "resolve_version",
    "ARTIFACT_TEMPLATE",
    "format_timestamp",
    "render",
    "strip_timestamp",
    "persist",
    "StampResult",
    "stamp",
]
