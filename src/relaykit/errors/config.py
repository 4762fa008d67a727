"""
Configuration errors.

These are raised before any I/O happens and are never recovered from
locally: an empty probe set, duplicate probe keys, a malformed oracle
path expression or mismatched fee parameter sets all indicate a caller
mistake rather than a transient condition.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from relaykit.errors.base import RelayKitError


class ConfigurationError(RelayKitError):
    """
    Base exception for invalid caller-supplied configuration.

    Example:
        >>> raise ConfigurationError("gas_price_oracle_path is required")
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="CONFIG_ERROR", details=details)


class ValidationError(ConfigurationError):
    """Raised when a single input value fails validation."""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Any = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if field is not None:
            details["field"] = field
            details["value"] = value
        super().__init__(message, details=details)
        self.code = "VALIDATION_ERROR"
        self.field = field
        self.value = value


class EmptyProbeSetError(ConfigurationError):
    """Raised when a race is started without any probes."""

    def __init__(self) -> None:
        super().__init__("wait_for_success: no probes to wait for")
        self.code = "EMPTY_PROBE_SET"


class ProbeKeyMismatchError(ConfigurationError):
    """Raised when the number of probe keys differs from the number of probes."""

    def __init__(self, probe_count: int, key_count: int) -> None:
        super().__init__(
            f"wait_for_success: got {probe_count} probes but {key_count} keys",
            details={"probe_count": probe_count, "key_count": key_count},
        )
        self.code = "PROBE_KEY_MISMATCH"
        self.probe_count = probe_count
        self.key_count = key_count


class DuplicateProbeKeyError(ConfigurationError):
    """
    Raised when two probes in one race share a key.

    Example:
        >>> raise DuplicateProbeKeyError(["https://relay.example.com"])
    """

    def __init__(self, keys: Iterable[str]) -> None:
        keys = sorted(set(keys))
        super().__init__(
            f"wait_for_success: duplicate keys, aborting: {', '.join(keys)}",
            details={"duplicate_keys": keys},
        )
        self.code = "DUPLICATE_PROBE_KEY"
        self.keys = keys


class MalformedPathError(ConfigurationError):
    """
    Raised when a path expression does not follow the path grammar.

    The offending path is quoted verbatim in the message so that operators
    can find it in their configuration.

    Example:
        >>> raise MalformedPathError("abc.def")
    """

    def __init__(self, path: str, *, position: Optional[int] = None) -> None:
        details: Dict[str, Any] = {"path": path}
        if position is not None:
            details["position"] = position
        super().__init__(f"invalid path: {path}", details=details)
        self.code = "MALFORMED_PATH"
        self.path = path
        self.position = position


class FeeParameterMismatchError(ConfigurationError):
    """Raised when client and server fee parameter sets cannot be paired by name."""

    def __init__(
        self,
        message: str,
        *,
        names: Iterable[str] = (),
    ) -> None:
        names = sorted(set(names))
        super().__init__(message, details={"names": names})
        self.code = "FEE_PARAMETER_MISMATCH"
        self.names = names
