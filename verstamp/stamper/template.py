"""Artifact template and rendering.

render() is a pure function: the same version, timestamp and settings
always produce the same text. The only run-to-run difference in generated
files is the timestamp line, which strip_timestamp() removes for comparison.
"""

from datetime import UTC, datetime

from verstamp.config.settings import Settings

GENERATED_BANNER = "// This file is automatically generated by code; do not manually update"
TIMESTAMP_PREFIX = "// Last updated on "

ARTIFACT_TEMPLATE = """\
{banner}
{timestamp_prefix}{timestamp}
// SPDX-License-Identifier: {license_id}
pragma solidity {solidity_version};

import {{ {interface_name} }} from "{interface_import}";


/// @title {contract_name}
/// @notice Base contract for versioning contracts
contract {contract_name} is {interface_name} {{
    /// @notice The version of the contract
    function contractVersion() external pure override returns (string memory) {{
        return "{version}";
    }}
}}
"""


def format_timestamp(timestamp: datetime) -> str:
    """Format as ISO-8601 UTC with millisecond precision, e.g. 2024-01-02T03:04:05.678Z.

    Naive datetimes are taken to be UTC already.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    else:
        timestamp = timestamp.astimezone(UTC)
    return timestamp.strftime("%Y-%m-%dT%H:%M:%S") + f".{timestamp.microsecond // 1000:03d}Z"


def render(version: str, timestamp: datetime, settings: Settings | None = None) -> str:
    """Render the versioned contract source."""
    settings = settings or Settings()
    return ARTIFACT_TEMPLATE.format(
        banner=GENERATED_BANNER,
        timestamp_prefix=TIMESTAMP_PREFIX,
        timestamp=format_timestamp(timestamp),
        license_id=settings.license_id,
        solidity_version=settings.solidity_version,
        interface_name=settings.interface_name,
        interface_import=settings.interface_import,
        contract_name=settings.contract_name,
        version=version,
    )


def strip_timestamp(text: str) -> str:
    """Drop the 'Last updated on' line so two renders can be compared."""
    return "".join(
        line
        for line in text.splitlines(keepends=True)
        if not line.startswith(TIMESTAMP_PREFIX)
    )
