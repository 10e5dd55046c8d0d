"""
Chatmands Utilities

Logging setup and the shared error types used throughout Chatmands.
"""

from .logging import (
    setup_logging,
    get_logger,
    log_startup,
    log_shutdown,
)

from .error_handling import (
    ChatmandsError,
    ConfigurationError,
    handle_configuration_operation,
)

__all__ = [
    # Logging utilities
    "setup_logging",
    "get_logger",
    "log_startup",
    "log_shutdown",

    # Error handling utilities
    "ChatmandsError",
    "ConfigurationError",
    "handle_configuration_operation",
]
