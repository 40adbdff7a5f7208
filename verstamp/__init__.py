"""VERSTAMP - Stamp a package version into a generated contract source file.

This package provides a small build-time CLI that reads the version from a
package manifest and regenerates a Solidity contract whose pure accessor
returns that version.
"""

__version__ = "1.0.0"
SCRIPT_NAME = "VERSTAMP"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
]
