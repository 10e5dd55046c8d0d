"""
Configuration loading system for Chatmands.

This module handles loading, merging, and validating configuration from
YAML files and environment variables.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any, List, Union
import yaml
from pydantic import ValidationError
from dotenv import load_dotenv

from .models import ChatmandsConfig
from ..utils.error_handling import ConfigurationError

ENV_PREFIX = "CHATMANDS_"
ENV_SEPARATOR = "__"

DEFAULT_CONFIG_PATHS = [
    Path("configs/default.yaml"),
    Path("configs/default.yml"),
    Path("config/default.yaml"),
    Path("config/default.yml"),
    Path("chatmands.yaml"),
    Path("chatmands.yml"),
]


class ConfigLoader:
    """
    Configuration loader that supports multiple sources and validation.

    Loading priority (highest to lowest):
    1. Environment variables (CHATMANDS_<SECTION>__<FIELD>)
    2. Explicitly given config file
    3. Default configuration file
    4. Built-in defaults (from Pydantic models)
    """

    def __init__(self, search_paths: Optional[List[Path]] = None):
        self._config: Optional[ChatmandsConfig] = None
        self._config_path: Optional[Path] = None
        self._search_paths = DEFAULT_CONFIG_PATHS if search_paths is None else search_paths

        env_file = Path(".env")
        if env_file.exists():
            load_dotenv(env_file)

    @property
    def config_path(self) -> Optional[Path]:
        """The explicit config file used by the last load, if any."""
        return self._config_path

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> ChatmandsConfig:
        """
        Load configuration from all sources and validate it.

        Args:
            config_path: Optional path to a specific config file

        Returns:
            Validated ChatmandsConfig instance

        Raises:
            ConfigurationError: If configuration loading or validation fails
        """
        config_data: Dict[str, Any] = {}

        default_config_path = self._find_default_config()
        if default_config_path:
            config_data = self._deep_merge(config_data, self._load_yaml_file(default_config_path))

        if config_path:
            explicit_path = Path(config_path)
            if not explicit_path.exists():
                raise ConfigurationError(
                    f"Specified config file not found: {config_path}",
                    details={"path": str(config_path)}
                )
            config_data = self._deep_merge(config_data, self._load_yaml_file(explicit_path))
            self._config_path = explicit_path

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = ChatmandsConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {self._format_validation_error(e)}",
                details={"errors": e.errors(include_url=False)}
            ) from e

        return self._config

    def get_config(self) -> ChatmandsConfig:
        """Get the current configuration, loading it if necessary."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def reload_config(self, config_path: Optional[Union[str, Path]] = None) -> ChatmandsConfig:
        """Reload configuration, reusing the last explicit file when none is given."""
        self._config = None
        return self.load_config(config_path or self._config_path)

    def _find_default_config(self) -> Optional[Path]:
        for path in self._search_paths:
            if path.exists():
                return path
        return None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse a YAML configuration file.

        Raises:
            ConfigurationError: If file cannot be read or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a YAML object (dictionary)")

        return data

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Example: CHATMANDS_APP__LOG_LEVEL=debug overrides app.log_level and
        CHATMANDS_COMMANDS__RESPONSES__DISCORD sets the ``!discord`` response.
        """
        result = config_data.copy()

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(ENV_PREFIX):
                continue
            path = [part.lower() for part in env_key[len(ENV_PREFIX):].split(ENV_SEPARATOR) if part]
            if len(path) < 2:
                continue
            if path[:2] == ["commands", "responses"]:
                # response texts are sent to chat verbatim
                value = env_value
            else:
                value = self._convert_env_value(env_value)
            self._set_nested_value(result, path, value)

        return result

    def _convert_env_value(self, value: str) -> Any:
        """Convert an environment variable string to bool, number or string."""
        if value.lower() in ('true', 'yes', 'on'):
            return True
        elif value.lower() in ('false', 'no', 'off'):
            return False

        try:
            if '.' not in value:
                return int(value)
            else:
                return float(value)
        except ValueError:
            pass

        return value

    def _set_nested_value(self, data: Dict[str, Any], path: list, value: Any) -> None:
        current = data

        for key in path[:-1]:
            if key not in current:
                current[key] = {}
            elif not isinstance(current[key], dict):
                # can't navigate further, skip this override
                return
            else:
                current[key] = dict(current[key])
            current = current[key]

        current[path[-1]] = value

    def _format_validation_error(self, error: ValidationError) -> str:
        messages = []
        for err in error.errors():
            location = " -> ".join(str(loc) for loc in err['loc'])
            message = err['msg']
            value = err.get('input', 'N/A')
            messages.append(f"  {location}: {message} (got: {value})")

        return "Validation errors:\n" + "\n".join(messages)


_config_loader = ConfigLoader()


def load_config(config_path: Optional[Union[str, Path]] = None) -> ChatmandsConfig:
    """
    Load configuration from all sources.

    Raises:
        ConfigurationError: If configuration loading fails
    """
    return _config_loader.load_config(config_path)


def get_config() -> ChatmandsConfig:
    """Get the current configuration, loading it if necessary."""
    return _config_loader.get_config()


def reload_config(config_path: Optional[Union[str, Path]] = None) -> ChatmandsConfig:
    """Reload configuration from sources."""
    return _config_loader.reload_config(config_path)


def validate_config_file(config_path: Union[str, Path]) -> tuple[bool, Optional[str]]:
    """
    Validate a configuration file without loading it globally.

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        ConfigLoader().load_config(config_path)
        return True, None
    except ConfigurationError as e:
        return False, str(e)
