"""Configuration management for VERSTAMP.

This package contains:
- settings: Settings dataclass with configuration fields
- manager: ConfigManager class for loading configuration
"""

from verstamp.config.manager import ConfigManager
from verstamp.config.settings import Settings

__all__ = [
    "Settings",
    "ConfigManager",
]
