"""Configuration manager for loading and merging configs."""

import logging
from pathlib import Path
from typing import Any

import toml
from pydantic import ValidationError

from flowsafe.config.schema import FlowsafeConfig, get_config_file
from flowsafe.errors import ConfigError
from flowsafe.normalize.lookup import safe_get

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = ".flowsafe.toml"


class ConfigManager:
    """Manages configuration loading, merging, and access."""

    _instance: "ConfigManager | None" = None
    _config: FlowsafeConfig | None = None

    def __new__(cls) -> "ConfigManager":
        """Singleton pattern for config manager."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_config(cls) -> FlowsafeConfig:
        """Get the current configuration, loading if necessary."""
        if cls._config is None:
            cls._config = cls.load_config()
        return cls._config

    @classmethod
    def load_config(cls) -> FlowsafeConfig:
        """Load configuration from all sources.

        Priority (highest to lowest):
        1. Project-level config (.flowsafe.toml in cwd or parents)
        2. User config (~/.config/flowsafe/config.toml)
        3. Default config
        """
        config_dict: dict[str, Any] = {}

        user_config_file = get_config_file()
        if user_config_file.exists():
            config_dict = cls._deep_merge(config_dict, cls._read_toml(user_config_file))

        project_config_file = cls._find_project_config()
        if project_config_file and project_config_file.exists():
            config_dict = cls._deep_merge(config_dict, cls._read_toml(project_config_file))

        if config_dict:
            try:
                return FlowsafeConfig.model_validate(config_dict)
            except ValidationError as e:
                raise ConfigError(f"Invalid configuration: {e}") from e
        return FlowsafeConfig.default()

    @classmethod
    def reload(cls) -> FlowsafeConfig:
        """Force reload configuration from disk."""
        cls._config = cls.load_config()
        return cls._config

    @classmethod
    def _read_toml(cls, path: Path) -> dict[str, Any]:
        logger.debug(f"Loading config from {path}")
        try:
            return toml.load(path)
        except (OSError, toml.TomlDecodeError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

    @classmethod
    def _find_project_config(cls) -> Path | None:
        """Find project-level config file by searching up from cwd."""
        cwd = Path.cwd()
        for parent in [cwd, *cwd.parents]:
            config_file = parent / PROJECT_CONFIG_NAME
            if config_file.exists():
                return config_file
            # Stop at home directory
            if parent == Path.home():
                break
        return None

    @classmethod
    def _deep_merge(
        cls, base: dict[str, Any], override: dict[str, Any]
    ) -> dict[str, Any]:
        """Deep merge two dictionaries, with override taking precedence."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = cls._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    @classmethod
    def save_user_config(cls, config_dict: dict[str, Any]) -> None:
        """Save a raw settings dict to the user config file."""
        config_file = get_config_file()
        with open(config_file, "w") as f:
            toml.dump(config_dict, f)

    @classmethod
    def set_value(cls, key_path: str, value: Any) -> None:
        """Set a configuration value by dot-separated path.

        Only the user config file is rewritten. Project overrides stay in
        their own file and are merged back in before validating.

        Example: set_value("classifier.threshold", 4)
        """
        keys = key_path.split(".")
        known = cls.get_config().model_dump(by_alias=True)
        for key in keys:
            if not isinstance(known, dict) or key not in known:
                raise ConfigError(f"Unknown config key: {key_path}")
            known = known[key]

        user_config_file = get_config_file()
        user_dict = cls._read_toml(user_config_file) if user_config_file.exists() else {}

        current = user_dict
        for key in keys[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]
        current[keys[-1]] = value

        merged = user_dict
        project_config_file = cls._find_project_config()
        if project_config_file and project_config_file.exists():
            merged = cls._deep_merge(user_dict, cls._read_toml(project_config_file))

        # Validate before persisting
        config = FlowsafeConfig.model_validate(merged)
        cls.save_user_config(user_dict)
        cls._config = config

    @classmethod
    def get_value(cls, key_path: str, default: Any = None) -> Any:
        """Get a configuration value by dot-separated path."""
        config_dict = cls.get_config().model_dump(by_alias=True)
        return safe_get(config_dict, key_path, default)
