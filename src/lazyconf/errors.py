"""Error hierarchy for the lazyconf library."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConfigError",
    "ParseError",
    "ResourceNotFoundError",
    "ResourceReadError",
    "SettingsError",
    "InvalidInputError",
    "ErrorCodes",
]


class ConfigError(Exception):
    """Base error for all lazyconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ParseError(ConfigError):
    """Raised when a resource of a recognized format has malformed content."""

    def __init__(self, resource_path: str, reason: str | None = None, **kwargs: Any) -> None:
        message = f"Cannot parse configuration resource: {resource_path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            code="CONFIG_PARSE_ERROR",
            message=message,
            details={"resource_path": resource_path, "reason": reason},
            **kwargs,
        )

    @property
    def resource_path(self) -> str:
        """Path of the resource that failed to parse."""
        return self.details["resource_path"]

    @property
    def reason(self) -> str | None:
        """Underlying parser message, if any."""
        return self.details["reason"]


class ResourceNotFoundError(ConfigError):
    """Raised when a configuration source cannot be found."""

    def __init__(self, resource_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="RESOURCE_NOT_FOUND",
            message=f"Configuration resource not found: {resource_path}",
            details={"resource_path": resource_path},
            **kwargs,
        )

    @property
    def resource_path(self) -> str:
        """The path that could not be found."""
        return self.details["resource_path"]


class ResourceReadError(ConfigError):
    """Raised when a leaf resource exists but its content cannot be read."""

    def __init__(self, resource_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="RESOURCE_READ_ERROR",
            message=f"Cannot read configuration resource {resource_path}: {reason}",
            details={"resource_path": resource_path, "reason": reason},
            **kwargs,
        )

    @property
    def resource_path(self) -> str:
        """The path that could not be read."""
        return self.details["resource_path"]


class SettingsError(ConfigError):
    """Raised when library settings are invalid."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="SETTINGS_INVALID",
            message=message,
            details={"errors": errors or []},
            **kwargs,
        )


class InvalidInputError(ConfigError):
    """Raised for invalid input."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class ErrorCodes:
    """All library error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_PARSE_ERROR:
            report_broken_file(error.details["resource_path"])
    """

    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RESOURCE_READ_ERROR = "RESOURCE_READ_ERROR"
    SETTINGS_INVALID = "SETTINGS_INVALID"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
