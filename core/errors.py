"""
Configuration error hierarchy.

Every failure of the bootstrap pipeline is raised as a ConfigError subclass.
Only core.bootstrap.bootstrap() turns these into a process exit.
"""

from typing import Optional


class ConfigError(Exception):
    """Base class for all configuration failures."""


class ConfigLoadError(ConfigError):
    """Config path missing, or the file cannot be read."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message)


class ConfigParseError(ConfigError):
    """Malformed document or a value of the wrong type."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message)


class ConfigValidationError(ConfigError):
    """
    Semantic validation failure.

    Carries the offending top-level field or the subsystem whose
    sub-config was rejected, so the message can be diagnosed
    without reading the source.
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        subsystem: Optional[str] = None,
    ):
        self.field = field
        self.subsystem = subsystem
        if subsystem:
            message = f"invalid {subsystem} configuration: {message}"
        elif field:
            message = f"invalid {field}: {message}"
        super().__init__(message)
