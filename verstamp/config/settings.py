"""Settings dataclass for VERSTAMP.

Each field is bound to an UPPER_SNAKE config key that may appear in a
local ``.verstamp`` file or in the environment.
"""

import re
from dataclasses import dataclass
from pathlib import PurePosixPath

from verstamp.utils.errors import ConfigReadError

LOCAL_CONFIG_NAME = ".verstamp"

# Maps config keys to Settings attribute names
_KEY_TO_ATTRIBUTE: dict[str, str] = {
    "VERSTAMP_MANIFEST": "manifest_path",
    "VERSTAMP_OUTPUT_DIR": "output_dir",
    "VERSTAMP_OUTPUT": "output_path",
    "VERSTAMP_CONTRACT_NAME": "contract_name",
    "VERSTAMP_FILE_EXTENSION": "file_extension",
    "VERSTAMP_LICENSE": "license_id",
    "VERSTAMP_SOLIDITY_VERSION": "solidity_version",
    "VERSTAMP_INTERFACE_NAME": "interface_name",
    "VERSTAMP_INTERFACE_IMPORT": "interface_import",
}
_ATTRIBUTE_TO_KEY = {attr: key for key, attr in _KEY_TO_ATTRIBUTE.items()}

# Characters a plain double-quoted Solidity string literal cannot hold
UNSAFE_LITERAL_CHARS = re.compile(r'["\\]|[^\x20-\x7e]')

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_FILE_EXTENSION = re.compile(r"^[A-Za-z0-9]+$")


@dataclass
class Settings:
    """Effective stamper configuration.

    Attributes:
        manifest_path: Manifest location, relative to the project root
        output_dir: Directory of the generated artifact, relative to the root
        output_path: Full artifact path relative to the root; when set it
            replaces output_dir/contract_name.file_extension
        contract_name: Contract name; also the artifact's file stem
        file_extension: Artifact file extension, without the dot
        license_id: SPDX license identifier written into the header
        solidity_version: Version in the ``pragma solidity`` line
        interface_name: Interface the generated contract implements
        interface_import: Import path of that interface

    Paths are trusted as given; names and template text are checked by
    validate().
    """

    manifest_path: str = "package.json"
    output_dir: str = "src/version"
    output_path: str = ""
    contract_name: str = "RevolutionVersion"
    file_extension: str = "sol"
    license_id: str = "GPL-3.0-or-later"
    solidity_version: str = "0.8.22"
    interface_name: str = "IVersionedContract"
    interface_import: str = "@cobuild/utility-contracts/src/interfaces/IVersionedContract.sol"

    @property
    def artifact_relpath(self) -> str:
        """Artifact path relative to the project root, e.g. src/version/X.sol."""
        if self.output_path:
            return self.output_path
        return str(PurePosixPath(self.output_dir) / f"{self.contract_name}.{self.file_extension}")

    @staticmethod
    def get_config_keys() -> list[str]:
        return list(_KEY_TO_ATTRIBUTE)

    @staticmethod
    def get_attribute_for_key(key: str) -> str | None:
        return _KEY_TO_ATTRIBUTE.get(key)

    def validate(self) -> None:
        """Check the values that end up inside the generated source.

        Raises:
            ConfigReadError: If a name is not a Solidity identifier, the file
                extension is not alphanumeric, or template text contains
                characters that would break the generated file.
        """
        for attr in ("contract_name", "interface_name"):
            if not _IDENTIFIER.fullmatch(getattr(self, attr)):
                self._invalid(attr, "must be a Solidity identifier")

        if not self.output_path and not _FILE_EXTENSION.fullmatch(self.file_extension):
            self._invalid("file_extension", "must be alphanumeric")

        for attr in ("license_id", "solidity_version", "interface_import"):
            if UNSAFE_LITERAL_CHARS.search(getattr(self, attr)):
                self._invalid(attr, "must be printable ASCII without quotes or backslashes")

    def _invalid(self, attr: str, reason: str) -> None:
        raise ConfigReadError(
            f"Invalid value {getattr(self, attr)!r} for {_ATTRIBUTE_TO_KEY[attr]}: {reason}"
        )
