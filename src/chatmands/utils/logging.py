"""
Logging setup for Chatmands.

Console output is coloured and human oriented, the optional log file gets
one JSON object per line. Chat bots handle OAuth tokens, so every handler
carries a filter that redacts anything that looks like a credential.
"""

import os
import sys
import json
import logging
import logging.handlers
import re
from pathlib import Path
from typing import Dict, Optional
from datetime import datetime


class Colors:
    """ANSI color codes for console output."""
    RESET = '\033[0m'
    BOLD = '\033[1m'

    BRIGHT_BLACK = '\033[90m'
    BRIGHT_RED = '\033[91m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'


class SensitiveDataFilter(logging.Filter):
    """Redact tokens and secrets from log records."""

    PATTERNS = [
        (re.compile(r'(oauth:)([a-z0-9]{8,})', re.IGNORECASE), r'\1***REDACTED***'),
        (re.compile(r'(bearer\s+)([a-zA-Z0-9._-]{20,})', re.IGNORECASE), r'\1***REDACTED***'),
        (re.compile(r'(client[_-]?secret|access[_-]?token|refresh[_-]?token|password)(["\s]*[:=]["\s]*)([^\s"]{8,})',
                    re.IGNORECASE), r'\1\2***REDACTED***'),
    ]

    def redact(self, text: str) -> str:
        for pattern, replacement in self.PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def filter(self, record):
        if isinstance(record.msg, str):
            record.msg = self.redact(record.msg)

        if record.args and isinstance(record.args, tuple):
            record.args = tuple(
                self.redact(arg) if isinstance(arg, str) else arg for arg in record.args
            )

        return True


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter that colours whole console lines by level."""

    LEVEL_COLORS = {
        'DEBUG': Colors.BRIGHT_BLACK,
        'INFO': Colors.BRIGHT_BLUE,
        'WARNING': Colors.BRIGHT_YELLOW,
        'ERROR': Colors.BRIGHT_RED,
        'CRITICAL': Colors.BRIGHT_MAGENTA + Colors.BOLD,
    }

    def __init__(self, use_colors=True, stream=None):
        self.use_colors = use_colors and self._supports_color(stream or sys.stderr)

        fmt = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
        super().__init__(fmt, datefmt='%Y-%m-%d %H:%M:%S')

    @staticmethod
    def _supports_color(stream) -> bool:
        if os.getenv('NO_COLOR'):
            return False
        if os.getenv('FORCE_COLOR'):
            return True
        if not hasattr(stream, 'isatty') or not stream.isatty():
            return False
        term = os.getenv('TERM', '').lower()
        return 'color' in term or term in ('xterm', 'screen', 'linux')

    def format(self, record):
        formatted = super().format(record)
        if not self.use_colors:
            return formatted

        color = self.LEVEL_COLORS.get(record.levelname, '')
        return f"{color}{formatted}{Colors.RESET}" if color else formatted


class JSONFileFormatter(logging.Formatter):
    """One JSON object per record, for the log file."""

    _STANDARD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message'}

    def format(self, record):
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'module': record.name,
            'message': record.getMessage(),
            'extra': {
                'filename': record.filename,
                'lineno': record.lineno,
                'funcName': record.funcName,
            },
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self._STANDARD_ATTRS:
                log_entry['extra'][key] = value

        return json.dumps(log_entry, default=str)


class LoggingManager:
    """Central logging manager for Chatmands."""

    MODULE_LEVELS = {
        "chatmands.grammar": "INFO",
        "chatmands.commands": "INFO",
        "chatmands.config": "INFO",
        "chatmands.bot": "INFO",
    }

    def __init__(self):
        self._initialized = False
        self._loggers: Dict[str, logging.Logger] = {}
        self._log_file: Optional[Path] = None

    def setup_logging(self, config, verbose: bool = False, force_reinit: bool = False):
        """Setup logging based on configuration.

        Args:
            config: ChatmandsConfig instance
            verbose: Enable debug output everywhere (overrides config)
            force_reinit: Force reinitialization even if already set up
        """
        if self._initialized and not force_reinit:
            return

        verbose = verbose or config.app.verbose_logging or config.app.debug
        if verbose:
            log_level = logging.DEBUG
        else:
            log_level = getattr(logging, config.app.log_level.value, logging.INFO)

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(ColoredConsoleFormatter(use_colors=True))
        root_logger.addHandler(console_handler)

        if config.app.log_file:
            self._setup_file_handler(root_logger, config, log_level)

        for module_name, level_name in self.MODULE_LEVELS.items():
            level = logging.DEBUG if verbose else getattr(logging, level_name, logging.INFO)
            logging.getLogger(module_name).setLevel(level)

        sensitive_filter = SensitiveDataFilter()
        for handler in root_logger.handlers:
            handler.addFilter(sensitive_filter)

        self._initialized = True

        logger = self.get_logger('chatmands.logging')
        logger.debug(f"Logging initialized at {logging.getLevelName(log_level)}")
        if self._log_file:
            logger.debug(f"Log file: {self._log_file}")

    def _setup_file_handler(self, root_logger: logging.Logger, config, log_level: int):
        """Rotating JSON log file; failures fall back to console-only logging."""
        log_file = Path(config.app.log_file)
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=config.app.max_log_size_mb * 1024 * 1024,
                backupCount=config.app.backup_count,
                encoding='utf-8'
            )
        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)
            return

        file_handler.setLevel(log_level)
        file_handler.setFormatter(JSONFileFormatter())
        root_logger.addHandler(file_handler)
        self._log_file = log_file

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger instance for the given name."""
        if name not in self._loggers:
            self._loggers[name] = logging.getLogger(name)
        return self._loggers[name]

    def is_initialized(self) -> bool:
        return self._initialized


_logging_manager = LoggingManager()


def setup_logging(config, verbose: bool = False, force_reinit: bool = False):
    """Setup logging based on configuration.

    Args:
        config: ChatmandsConfig instance
        verbose: Enable verbose logging
        force_reinit: Force reinitialization
    """
    _logging_manager.setup_logging(config, verbose, force_reinit)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name (typically ``__name__``)."""
    return _logging_manager.get_logger(name)


def log_startup(config_path: Optional[str] = None):
    """Log application startup information."""
    logger = get_logger('chatmands.startup')
    logger.info("🤖 Chatmands starting up...")

    if config_path:
        logger.info(f"📁 Configuration loaded from: {config_path}")
    else:
        logger.info("📁 Using default configuration")


def log_shutdown():
    """Log application shutdown."""
    logger = get_logger('chatmands.shutdown')
    logger.info("👋 Chatmands shutting down...")
