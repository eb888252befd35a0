"""Configuration for concept-demos using YAML files."""

from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger()

CONFIG_DIR_NAME = ".concept-demos"
CONFIG_FILE_NAME = "config.yaml"

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
DEFAULT_LOG_LEVEL = "critical"


class Config:
    """Read-only configuration loaded from YAML.

    Supports both local (working-directory) and global (user-level) configuration.
    Local config is read from .concept-demos/config.yaml in the current directory.
    Global config is read from ~/.concept-demos/config.yaml.

    When reading, values are looked up in local config first, then global config.
    Missing files are treated as empty configuration.
    """

    def __init__(
        self,
        use_global: bool = False,
        config_dir: Path | None = None,
        global_config_dir: Path | None = None,
    ) -> None:
        """Initialize configuration.

        Args:
            use_global: If True, use global config only. If False, use local config with global fallback.
            config_dir: Custom directory to read the config file from (overrides use_global)
            global_config_dir: Custom directory for the global fallback (defaults to the home directory)
        """
        global_dir = Path(global_config_dir) if global_config_dir is not None else Path.home() / CONFIG_DIR_NAME

        if config_dir is not None:
            self.config_dir = Path(config_dir)
            self.is_global = use_global
        elif use_global:
            self.config_dir = global_dir
            self.is_global = True
        else:
            self.config_dir = Path.cwd() / CONFIG_DIR_NAME
            self.is_global = False

        self.config_file = self.config_dir / CONFIG_FILE_NAME
        self._config: dict[str, Any] = self._load(self.config_file)

        # For local config, also load global config as fallback
        self._global_config: dict[str, Any] = {}
        if not self.is_global:
            global_config_file = global_dir / CONFIG_FILE_NAME
            if global_config_file != self.config_file and global_config_file.exists():
                try:
                    self._global_config = self._load(global_config_file)
                except ValueError as e:
                    logger.warning("Failed to load global config", error=str(e))

        logger.debug("Config initialized", config_file=str(self.config_file), is_global=self.is_global)

    @staticmethod
    def _load(config_file: Path) -> dict[str, Any]:
        """Load configuration from a YAML file.

        Returns:
            Configuration dictionary
        """
        if not config_file.exists():
            logger.debug("Config file does not exist, using empty config", config_file=str(config_file))
            return {}

        try:
            with open(config_file, "r") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to load config", error=str(e))
            raise ValueError(f"Failed to load config from {config_file}: {e}") from e

        if not isinstance(config, dict):
            raise ValueError(f"Config in {config_file} must be a mapping, got {type(config).__name__}")
        logger.debug("Config loaded successfully", keys=list(config.keys()))
        return config

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get a configuration value.

        For local config, checks local config first, then falls back to global config.

        Args:
            key: Configuration key
            default: Default value if key doesn't exist

        Returns:
            Configuration value or default
        """
        if key in self._config:
            logger.debug("Getting config value from local", key=key)
            return self._config[key]

        if not self.is_global and key in self._global_config:
            logger.debug("Getting config value from global", key=key)
            return self._global_config[key]

        logger.debug("Config value not found", key=key)
        return default

    def source(self, key: str) -> str | None:
        """Return "local" or "global" for the file a key is read from, or None if unset."""
        if key in self._config:
            return "global" if self.is_global else "local"
        if not self.is_global and key in self._global_config:
            return "global"
        return None

    def get_log_level(self) -> str:
        """Get the configured log level, falling back to the default.

        Raises:
            ValueError: If the configured level is not one of LOG_LEVELS
        """
        configured = self.get("log_level")
        if configured is None:
            return DEFAULT_LOG_LEVEL
        level = str(configured).lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log_level in config: {configured}. Expected one of: {', '.join(LOG_LEVELS)}")
        return level

    def list(self) -> dict[str, Any]:
        """List all configuration settings.

        For local config, merges global config with local config (local takes precedence).
        """
        if self.is_global:
            return self._config.copy()
        merged = self._global_config.copy()
        merged.update(self._config)
        logger.debug("Listing merged config values", count=len(merged))
        return merged


def get_config(use_global: bool = False) -> Config:
    """Get a configuration instance.

    Args:
        use_global: If True, return global config. If False, return local config with global fallback.
    """
    return Config(use_global=use_global)
