"""
Validation utilities for relaykit.

Provides input validation for:
- Relay and oracle URLs
- Ethereum addresses
- Base-unit integer quantities (decimal or hex wire encoding)

Raising validators raise ValidationError on failure; ``is_valid_*``
helpers return a boolean instead.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlparse

from relaykit.errors import ValidationError

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")
MAX_UINT256 = 2**256 - 1


def is_valid_relay_url(url: str) -> bool:
    """
    Check whether a string is an absolute http(s) URL with a host.

    Example:
        >>> is_valid_relay_url("https://relay.example.com/gsn1")
        True
        >>> is_valid_relay_url("ftp://relay.example.com")
        False
    """
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.hostname)


def validate_url(url: str, field_name: str = "url") -> str:
    """
    Validate an http(s) URL.

    Args:
        url: URL to validate
        field_name: Field name for error messages

    Returns:
        URL with any trailing slash removed

    Raises:
        ValidationError: If the URL is empty, malformed or not http(s)
    """
    if not url:
        raise ValidationError(f"{field_name} is required", field=field_name, value=url)
    if not is_valid_relay_url(url):
        raise ValidationError(
            f"Invalid {field_name}: must be an http or https URL with a host",
            field=field_name,
            value=url,
        )
    return url.rstrip("/")


def is_valid_address(address: str) -> bool:
    """
    Check if a string is a valid Ethereum address (0x + 40 hex chars).

    Example:
        >>> is_valid_address("0x742d35Cc6634C0532925a3b844Bc9e7595f0bBe0")
        True
    """
    if not address or not isinstance(address, str):
        return False
    return bool(ADDRESS_PATTERN.match(address))


def parse_quantity(value: Any, field_name: str = "value") -> int:
    """
    Parse a non-negative base-unit integer from its wire encoding.

    Accepts ints, decimal strings and 0x-prefixed hex strings, which is how
    relays report fee values.

    Raises:
        ValidationError: If the value is not a non-negative uint256
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field_name}: not a quantity", field=field_name, value=value)

    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            if text[:2].lower() == "0x":
                parsed = int(text[2:], 16)
            else:
                parsed = int(text, 10)
        except ValueError:
            raise ValidationError(
                f"Invalid {field_name}: not a quantity", field=field_name, value=value
            ) from None
    else:
        raise ValidationError(f"Invalid {field_name}: not a quantity", field=field_name, value=value)

    if parsed < 0 or parsed > MAX_UINT256:
        raise ValidationError(f"Invalid {field_name}: out of range", field=field_name, value=value)
    return parsed
