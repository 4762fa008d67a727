"""
Relay-related exceptions.

Per-relay failures (ping errors, relays not ready, fee rejections) are
recorded against the relay URL during selection; only
NoRelayAvailableError is raised to the caller of RelaySelector.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from relaykit.errors.base import RelayKitError


class RelayError(RelayKitError):
    """
    Base exception for relay interactions.

    Example:
        >>> raise RelayError("Relay misbehaved", relay_url="https://relay.example")
    """

    def __init__(
        self,
        message: str,
        *,
        relay_url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if relay_url:
            details["relay_url"] = relay_url
        super().__init__(message, code="RELAY_ERROR", details=details)
        self.relay_url = relay_url


class RelayPingError(RelayError):
    """Raised when a relay ping fails or returns an unusable payload."""

    def __init__(self, relay_url: str, reason: str) -> None:
        super().__init__(
            f"Ping to {relay_url} failed: {reason}",
            relay_url=relay_url,
            details={"reason": reason},
        )
        self.code = "RELAY_PING_FAILED"
        self.reason = reason


class RelayNotReadyError(RelayError):
    """Raised when a relay answers the ping but reports it is not ready."""

    def __init__(self, relay_url: str) -> None:
        super().__init__(f"Relay {relay_url} is not ready", relay_url=relay_url)
        self.code = "RELAY_NOT_READY"


class RelayRejectedError(RelayError):
    """Raised when a responsive relay cannot serve the negotiated fees."""

    def __init__(self, relay_url: str, reason: str) -> None:
        super().__init__(
            f"Relay {relay_url} rejected: {reason}",
            relay_url=relay_url,
            details={"reason": reason},
        )
        self.code = "RELAY_REJECTED"
        self.reason = reason


class FeeDeviationTooHighError(RelayRejectedError):
    """
    Raised when a relay's minimum fees deviate more than the caller tolerates.

    Example:
        >>> raise FeeDeviationTooHighError("https://relay.example", 50, 20)
    """

    def __init__(self, relay_url: str, deviation_percent: int, tolerance_percent: int) -> None:
        super().__init__(
            relay_url,
            f"fee deviation {deviation_percent}% exceeds tolerance {tolerance_percent}%",
        )
        self.code = "FEE_DEVIATION_TOO_HIGH"
        self.details["deviation_percent"] = deviation_percent
        self.details["tolerance_percent"] = tolerance_percent
        self.deviation_percent = deviation_percent
        self.tolerance_percent = tolerance_percent


class NoRelayAvailableError(RelayError):
    """Raised when no candidate relay was responsive and acceptable."""

    def __init__(self, errors: Mapping[str, BaseException]) -> None:
        super().__init__(
            f"No relay available ({len(errors)} candidates failed)",
            details={"errors": {url: str(err) for url, err in errors.items()}},
        )
        self.code = "NO_RELAY_AVAILABLE"
        self.errors = dict(errors)
