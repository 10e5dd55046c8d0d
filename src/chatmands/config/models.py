"""
Pydantic models for Chatmands configuration validation.
"""

from typing import Dict, Optional
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AppConfig(BaseModel):
    """Application-level configuration settings."""

    name: str = Field(default="Chatmands", min_length=1, description="Application display name")
    debug: bool = Field(default=False, description="Debug mode, implies verbose logging")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    verbose_logging: bool = Field(default=False, description="Enable verbose debug logging")

    log_file: Optional[str] = Field(default=None, description="JSON log file location, disabled when empty")
    max_log_size_mb: int = Field(default=10, ge=1, le=1000, description="Maximum log file size")
    backup_count: int = Field(default=5, ge=1, le=100, description="Number of backup log files")

    @field_validator('log_level', mode='before')
    @classmethod
    def upper_log_level(cls, v):
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator('log_file')
    @classmethod
    def expand_path(cls, v):
        """Expand user home directory in paths."""
        if not v:
            return None
        return str(Path(v).expanduser())


class CommandsConfig(BaseModel):
    """Simple text commands: ``!name`` answers with a fixed response."""

    cooldown: float = Field(default=30.0, ge=0.0, description="Cooldown per command in seconds")
    responses: Dict[str, str] = Field(default_factory=dict, description="Command name to response text")

    @field_validator('responses', mode='before')
    @classmethod
    def stringify(cls, v):
        """YAML and environment overrides may produce numbers for keys or values."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {str(name): "" if response is None else str(response) for name, response in v.items()}
        return v

    @field_validator('responses')
    @classmethod
    def validate_names(cls, v):
        """Names are single words; a leading ``!`` is optional."""
        validated = {}
        for name, response in v.items():
            name = name.strip()
            if name.startswith("!"):
                name = name[1:]
            if not name or any(ch.isspace() for ch in name):
                raise ValueError(f"Invalid command name {name!r}: must be a single non-empty word")
            validated[name] = response
        return validated


class ChatmandsConfig(BaseModel):
    """Main configuration model."""

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    app: AppConfig = Field(default_factory=AppConfig)
    commands: CommandsConfig = Field(default_factory=CommandsConfig)
