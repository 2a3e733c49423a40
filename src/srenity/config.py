"""Configuration management for the srenity client using YAML files."""

from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger()

CONFIG_DIR_NAME = ".srenity"

# Keys understood by the client
API_URL = "api_url"
AUTH_URL = "auth_url"
CLIENT_ID = "client_id"
CLIENT_SECRET = "client_secret"

KNOWN_KEYS = (API_URL, AUTH_URL, CLIENT_ID, CLIENT_SECRET)


class Config:
    """Configuration manager using YAML file storage.

    Local config lives in ``.srenity/config.yaml`` in the current directory,
    global config in ``~/.srenity/config.yaml``. Lookups check the local file
    first and fall back to the global one.
    """

    def __init__(self, use_global: bool = False, config_dir: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            use_global: If True, use global config only. If False, use local config with global fallback.
            config_dir: Custom directory to store config file (overrides use_global)
        """
        if config_dir is not None:
            self.config_dir = Path(config_dir)
            self.is_global = use_global
        elif use_global:
            self.config_dir = self.global_dir()
            self.is_global = True
        else:
            self.config_dir = Path.cwd() / CONFIG_DIR_NAME
            self.is_global = False

        self.config_file = self.config_dir / "config.yaml"
        self._config: dict[str, Any] = self._read(self.config_file)

        self._global_config: dict[str, Any] = {}
        if not self.is_global:
            global_config_file = self.global_dir() / "config.yaml"
            if global_config_file.exists() and global_config_file != self.config_file:
                try:
                    self._global_config = self._read(global_config_file)
                except ValueError as e:
                    logger.warning("Failed to load global config", error=str(e))

        logger.debug("Config initialized", config_file=str(self.config_file), is_global=self.is_global)

    @staticmethod
    def global_dir() -> Path:
        return Path.home() / CONFIG_DIR_NAME

    def _read(self, config_file: Path) -> dict[str, Any]:
        """Load configuration from a YAML file.

        Returns:
            Configuration dictionary, empty if the file does not exist
        """
        if not config_file.exists():
            logger.debug("Config file does not exist", config_file=str(config_file))
            return {}

        try:
            with open(config_file, "r") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to load config", config_file=str(config_file), error=str(e))
            raise ValueError(f"Failed to load config from {config_file}: {e}") from e

        if not isinstance(config, dict):
            raise ValueError(f"Config file {config_file} must contain a mapping")
        logger.debug("Config loaded successfully", keys=list(config.keys()))
        return config

    def _save(self) -> None:
        """Save configuration to the YAML file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as f:
                yaml.safe_dump(self._config, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            logger.error("Failed to save config", error=str(e))
            raise ValueError(f"Failed to save config to {self.config_file}: {e}") from e
        logger.debug("Config saved successfully")

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get a configuration value, checking local before global config."""
        if key in self._config:
            logger.debug("Getting config value from local", key=key)
            return self._config[key]

        if not self.is_global and key in self._global_config:
            logger.debug("Getting config value from global", key=key)
            return self._global_config[key]

        logger.debug("Config value not found", key=key)
        return default

    def require(self, key: str) -> str:
        """Get a configuration value that must be set.

        Raises:
            ValueError: If the key is not set in local or global config
        """
        value = self.get(key)
        if value is None or str(value) == "":
            raise ValueError(f"{key} not configured. Set it using:\n  srenity config set {key} <value>")
        # YAML turns bare numbers into ints
        return str(value)

    def set(self, key: str, value: str) -> None:
        """Set a configuration value."""
        if key not in KNOWN_KEYS:
            logger.warning("Setting unknown config key", key=key, known_keys=list(KNOWN_KEYS))
        logger.debug("Setting config value", key=key)
        self._config[key] = value
        self._save()

    def unset(self, key: str) -> None:
        """Remove a configuration value."""
        logger.debug("Unsetting config value", key=key)
        if key in self._config:
            del self._config[key]
            self._save()

    def list(self) -> dict[str, str]:
        """List all configuration settings, local taking precedence over global."""
        if self.is_global:
            logger.debug("Listing global config values", count=len(self._config))
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
