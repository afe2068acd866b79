"""Configuration management for the list TUI.

Loads configuration from TOML file with sensible defaults.
Location: ~/.config/refreshable_list/config.toml
"""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger

from refreshable_list.tui.utils.errors import ConfigError


def _toml_string(value: str) -> str:
    """Quote a value as a TOML basic string.

    JSON string escapes are valid TOML escapes; TOML additionally forbids a raw DEL.
    """
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")


@dataclass
class ListConfig:
    """List content configuration."""
    title: str = "Refreshable Table"
    item_count: int = 50
    reuse_key: str = "REUSE"
    min_length: int = 8
    max_length: int = 16
    seed: Optional[int] = None


@dataclass
class UIConfig:
    """UI configuration."""
    zebra_stripes: bool = True
    notify_on_refresh: bool = True


@dataclass
class LoggingConfig:
    """Log sink configuration."""
    level: str = "DEBUG"
    file: str = "/tmp/refreshable_list.log"
    rotation: str = "10 MB"


@dataclass
class Config:
    """Main configuration container."""
    list: ListConfig = field(default_factory=ListConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ConfigError: If a value is out of range
        """
        if self.list.item_count < 0:
            raise ConfigError(f"item_count must be >= 0, got {self.list.item_count}")
        if not self.list.reuse_key:
            raise ConfigError("reuse_key must not be empty")
        if self.list.min_length < 1 or self.list.min_length > self.list.max_length:
            raise ConfigError(
                f"invalid string length range {self.list.min_length}..{self.list.max_length}"
            )

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from TOML file or use defaults.

        Args:
            config_path: Path to config file. If None, uses default location.

        Returns:
            Config object
        """
        if config_path is None:
            config_path = cls.get_default_config_path()

        config = cls()

        # If config file doesn't exist, return defaults and create default file
        if not config_path.exists():
            logger.info(f"Config file not found at {config_path}, using defaults")
            cls._create_default_config(config_path)
            return config

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)

            # Parse sections
            if "list" in data:
                config.list = ListConfig(**data["list"])
            if "ui" in data:
                config.ui = UIConfig(**data["ui"])
            if "logging" in data:
                config.logging = LoggingConfig(**data["logging"])

            config.validate()
            logger.info(f"Loaded config from {config_path}")
            return config

        except (OSError, TypeError, ValueError, ConfigError) as e:
            logger.error(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default configuration")
            return cls()

    @staticmethod
    def get_default_config_path() -> Path:
        """Get default configuration file path.

        Returns:
            Path to ~/.config/refreshable_list/config.toml
        """
        config_dir = Path.home() / ".config" / "refreshable_list"
        return config_dir / "config.toml"

    @staticmethod
    def _create_default_config(config_path: Path) -> None:
        """Create default configuration file.

        Args:
            config_path: Path where to create config file
        """
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(Config().to_toml(), encoding="utf-8")
            logger.info(f"Created default config at {config_path}")
        except OSError as e:
            logger.error(f"Failed to create default config: {e}")

    def to_toml(self) -> str:
        """Render configuration as TOML text."""
        seed_line = f"seed = {self.list.seed}\n" if self.list.seed is not None else ""
        return f"""# Refreshable List TUI Configuration

[list]
title = {_toml_string(self.list.title)}
item_count = {self.list.item_count}
reuse_key = {_toml_string(self.list.reuse_key)}
min_length = {self.list.min_length}
max_length = {self.list.max_length}
{seed_line}
[ui]
zebra_stripes = {str(self.ui.zebra_stripes).lower()}
notify_on_refresh = {str(self.ui.notify_on_refresh).lower()}

[logging]
level = {_toml_string(self.logging.level)}
file = {_toml_string(self.logging.file)}
rotation = {_toml_string(self.logging.rotation)}
"""

    def save(self, config_path: Path | None = None) -> None:
        """Save configuration to TOML file.

        Args:
            config_path: Path to save config. If None, uses default location.
        """
        if config_path is None:
            config_path = self.get_default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            config_path.write_text(self.to_toml(), encoding="utf-8")
            logger.info(f"Saved config to {config_path}")
        except OSError as e:
            logger.error(f"Failed to save config: {e}")
