"""
Base exception class for relaykit.

All relaykit exceptions inherit from RelayKitError, which carries a
machine-readable error code and a dictionary of structured details that
can be attached to log records.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class RelayKitError(Exception):
    """
    Base exception for all relaykit errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code (e.g., "CONFIG_ERROR").
        details: Optional dictionary with additional error context.

    Example:
        >>> raise RelayKitError(
        ...     "Relay did not answer",
        ...     code="RELAY_ERROR",
        ...     details={"relay_url": "https://relay.example.com"}
        ... )
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "RELAYKIT_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to a dictionary for JSON serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }
