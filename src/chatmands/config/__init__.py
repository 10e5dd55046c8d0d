"""
Chatmands Configuration System

    from chatmands.config import load_config

    config = load_config("chatmands.yaml")
    print(config.commands.cooldown)    # 30.0
    print(config.commands.responses)   # {"discord": "https://..."}
"""

from .loader import (
    ConfigLoader,
    load_config,
    get_config,
    reload_config,
    validate_config_file,
)

from .models import (
    ChatmandsConfig,
    AppConfig,
    CommandsConfig,
    LogLevel,
)

from ..utils.error_handling import ConfigurationError

__all__ = [
    "ConfigLoader",
    "get_config",
    "load_config",
    "reload_config",
    "validate_config_file",

    "ConfigurationError",

    "ChatmandsConfig",
    "AppConfig",
    "CommandsConfig",
    "LogLevel",
]
