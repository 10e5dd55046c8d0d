"""
Shared error types and error handling helpers for Chatmands.

Every exception raised on purpose by the package derives from
``ChatmandsError`` so callers can tell expected failures from bugs.
"""

import functools
import logging
from typing import Any, Callable, Dict, Optional

from .logging import get_logger


class ChatmandsError(Exception):
    """Base exception for all Chatmands errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Structured view of the error for logs."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(ChatmandsError):
    """Configuration loading or validation failed."""
    pass


def handle_configuration_operation(operation_name: str, logger: Optional[logging.Logger] = None):
    """
    Decorator to standardize configuration operation error handling.

    ``ConfigurationError`` passes through untouched, anything else is logged
    and wrapped so callers only have to catch one type.

    Args:
        operation_name: Human-readable name of the operation
        logger: Optional logger instance (defaults to an operation-specific logger)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            _logger = logger or get_logger(f"chatmands.config.{operation_name}")

            try:
                _logger.debug(f"Starting {operation_name}")
                result = func(*args, **kwargs)
                _logger.info(f"{operation_name} completed successfully")
                return result

            except ConfigurationError as e:
                _logger.error(f"{operation_name} failed: {e}")
                raise

            except (FileNotFoundError, PermissionError) as e:
                _logger.error(f"{operation_name} failed - file access error: {e}")
                raise ConfigurationError(
                    f"{operation_name} failed: {e}",
                    details={"error_type": "file_access", "original_error": str(e)}
                ) from e

            except (ValueError, TypeError) as e:
                _logger.error(f"{operation_name} failed - validation error: {e}")
                raise ConfigurationError(
                    f"{operation_name} failed: {e}",
                    details={"error_type": "validation", "original_error": str(e)}
                ) from e

            except Exception as e:
                _logger.error(f"{operation_name} failed - unexpected error: {e}", exc_info=True)
                raise ConfigurationError(
                    f"{operation_name} failed: {e}",
                    details={"error_type": "unexpected", "original_error": str(e)}
                ) from e

        return wrapper

    return decorator
