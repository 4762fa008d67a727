"""
Gas price oracle exceptions.

These never escape GasPriceFetcher: they describe why the oracle value
could not be used and are turned into error log lines before the fetcher
falls back to the on-chain price.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from relaykit.errors.base import RelayKitError


class OracleError(RelayKitError):
    """Base exception for gas price oracle failures."""

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if url:
            details["url"] = url
        super().__init__(message, code="ORACLE_ERROR", details=details)
        self.url = url


class OracleUnreachableError(OracleError):
    """
    Raised when the oracle could not be reached or answered with an HTTP error.

    Example:
        >>> raise OracleUnreachableError("https://oracle.example", "ConnectError: refused")
    """

    def __init__(self, url: str, cause: str) -> None:
        super().__init__(
            f"Failed to fetch gas price from oracle {url}: {cause}",
            url=url,
            details={"cause": cause},
        )
        self.code = "ORACLE_UNREACHABLE"
        self.cause = cause


class OracleResponseError(OracleError):
    """
    Raised when the oracle answered but no positive number was found at the path.

    Example:
        >>> raise OracleResponseError("https://oracle.example", ".result", "no value")
    """

    def __init__(self, url: str, path: str, found: str) -> None:
        super().__init__(
            f"not a number: oracle {url} path {path} returned {found}",
            url=url,
            details={"path": path, "found": found},
        )
        self.code = "ORACLE_NOT_A_NUMBER"
        self.path = path
        self.found = found
