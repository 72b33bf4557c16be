"""Error hierarchy for namefilter.

Pattern compilation never fails; these errors are raised only while loading
configuration and filter rules.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "NameFilterError",
    "ConfigNotFoundError",
    "ConfigError",
    "FilterRuleError",
    "ErrorCodes",
]


class NameFilterError(Exception):
    """Base error for all namefilter errors."""

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


class ConfigNotFoundError(NameFilterError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        """The path that was looked up."""
        return self.details["config_path"]


class ConfigError(NameFilterError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class FilterRuleError(NameFilterError):
    """Raised when one or more filter rules are malformed."""

    def __init__(
        self,
        message: str = "Invalid filter rules",
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="FILTER_RULE_ERROR",
            message=message,
            details={"errors": errors or []},
            **kwargs,
        )

    @property
    def errors(self) -> list[dict[str, Any]]:
        """Per-field validation failures, each with ``path`` and ``message``."""
        return self.details["errors"]


class ErrorCodes:
    """All error code constants."""

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    FILTER_RULE_ERROR = "FILTER_RULE_ERROR"
