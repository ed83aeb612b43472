"""Aligo SMS Exception Hierarchy.

Only construction-time problems are raised. Failed sends are reported
through ``SMSResult`` instead.
"""

from __future__ import annotations

from typing import Any


class AligoSMSError(Exception):
    """Base exception for all aligo_sms errors.

    Provides:
    - Structured error context
    - Logging-friendly representation
    """

    error_code: str = "ALIGO_SMS_ERROR"

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context for debugging
            cause: Original exception if wrapping
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    def __str__(self) -> str:
        parts = [f"{self.error_code}: {self.message}"]
        if self.details:
            parts.append(f"details={self.details}")
        if self.cause:
            parts.append(f"cause={self.cause}")
        return " | ".join(parts)


class ConfigError(AligoSMSError):
    """Driver configuration is missing a required value or is invalid."""

    error_code = "CONFIG_ERROR"
