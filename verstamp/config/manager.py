"""Configuration manager for VERSTAMP.

Values cascade, highest priority first:

    1. Environment Variables (VERSTAMP_*)
    2. Local Config (.verstamp in the project root)
    3. Built-in Defaults (Settings dataclass)

CLI overrides are applied on top by the caller after load().
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from verstamp.config.settings import LOCAL_CONFIG_NAME, Settings
from verstamp.utils.console import print_warning
from verstamp.utils.errors import ConfigReadError
from verstamp.utils.logging import log_message

logger = logging.getLogger(__name__)

_LINE_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")


class ConfigManager:
    """Loads stamper settings from the project root and the environment.

    The local config file uses safe line-by-line ``KEY=VALUE`` parsing
    (no eval/exec). Unknown keys are ignored with a warning.
    """

    def __init__(self, root: Path | None = None) -> None:
        self.root = root or Path.cwd()
        self.local_config_path: Path | None = None
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources with cascading precedence.

        Idempotent: each call starts again from clean defaults.

        Raises:
            ConfigReadError: If a local config file exists but cannot be read.
        """
        self.settings = Settings()
        self.local_config_path = None
        self._raw_values = {}
        self._config_sources = {}

        local_path = self.root / LOCAL_CONFIG_NAME
        if local_path.is_file():
            self.local_config_path = local_path
            log_message(f"Loading local configuration from {local_path}")
            self._load_file(local_path, source=f"local ({local_path})")

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _load_file(self, path: Path, source: str) -> None:
        """Load key=value pairs from a config file."""
        try:
            with path.open(encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(f"Cannot read config file {path}: {e}", path=path) from e

        for line in lines:
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            match = _LINE_PATTERN.match(line)
            if not match:
                self._warn(f"Ignoring malformed line in {path}: {line!r}")
                continue

            key, value = match.groups()
            # Double quotes allow \" and \\ escapes; single quotes are literal
            if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                value = self._unescape_value(value[1:-1])
            elif len(value) >= 2 and value.startswith("'") and value.endswith("'"):
                value = value[1:-1]

            self._raw_values[key] = value
            self._config_sources[key] = source

    def _load_environment(self) -> None:
        """Override config with environment variables for known keys only."""
        for key in Settings.get_config_keys():
            env_value = os.environ.get(key)
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        attr = Settings.get_attribute_for_key(key)
        if attr is None:
            self._warn(f"Unknown config key {key!r}, ignoring")
            return
        if not value:
            self._warn(f"Empty value for config key {key!r}, keeping default")
            return
        setattr(self.settings, attr, value)

    @staticmethod
    def _unescape_value(value: str) -> str:
        result = value.replace("\\\\", "\\")
        result = result.replace('\\"', '"')
        return result

    @staticmethod
    def _warn(message: str) -> None:
        logger.warning(message)
        print_warning(message)

    def get_source(self, key: str) -> str:
        """Return where a key's effective value came from."""
        return self._config_sources.get(key, "default")


__all__ = ["ConfigManager"]
