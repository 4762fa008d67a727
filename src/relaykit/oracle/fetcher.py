"""
Gas price fetcher with an external oracle and on-chain fallback.

The oracle is any HTTP endpoint returning JSON (Etherscan's gas tracker,
for example). One field of the response, selected with a path
expression, is read as a price in gwei. Whenever that does not work the
fetcher logs why and returns the fallback source's price instead.
"""

from __future__ import annotations

import json
import logging
import math
from decimal import ROUND_DOWN, Decimal, DecimalException, InvalidOperation, localcontext
from typing import Any, Optional

import httpx

from relaykit.errors import (
    ConfigurationError,
    OracleError,
    OracleResponseError,
    OracleUnreachableError,
)
from relaykit.oracle.path import ABSENT, JsonPath
from relaykit.oracle.sources import FeeSource
from relaykit.utils.logging import get_logger
from relaykit.utils.validation import MAX_UINT256, validate_url

GWEI = 10**9
"""Oracle prices are quoted in gwei; the fetcher returns wei."""

DEFAULT_ORACLE_TIMEOUT_MS = 5000

# Enough digits to hold any uint256 wei value exactly before truncation.
_WEI_PRECISION = 100


def _describe(value: Any) -> str:
    if value is ABSENT:
        return "no value at path"
    text = json.dumps(value, default=str)
    if len(text) > 200:
        text = text[:200] + "..."
    return text


def parse_gwei(value: Any) -> Optional[Decimal]:
    """
    Interpret an oracle value as a positive gwei amount.

    Strings and numbers are accepted; booleans, NaN, infinities, zero and
    negatives are not.

    Returns:
        The amount, or None when the value is not a positive number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not amount.is_finite() or amount <= 0:
        return None
    return amount


def gwei_to_wei(amount: Decimal) -> Optional[int]:
    """
    Convert a gwei amount to wei, truncating fractional wei.

    Returns:
        The wei value, or None when it is not in ``1..MAX_UINT256``
    """
    with localcontext() as ctx:
        ctx.prec = _WEI_PRECISION
        ctx.rounding = ROUND_DOWN
        try:
            wei = int(amount * GWEI)
        except DecimalException:
            return None
    if wei <= 0 or wei > MAX_UINT256:
        return None
    return wei


class GasPriceFetcher:
    """
    Resolve the gas price to offer relays.

    Example:
        ```python
        fetcher = GasPriceFetcher(
            "https://api.etherscan.io/api?module=gastracker&action=gasoracle",
            ".result.ProposeGasPrice",
            Web3FeeSource(w3),
        )
        gas_price_wei = await fetcher.get_gas_price()
        ```
    """

    def __init__(
        self,
        oracle_url: Optional[str],
        oracle_path: Optional[str],
        fallback: FeeSource,
        *,
        logger: Optional[logging.Logger] = None,
        timeout_ms: int = DEFAULT_ORACLE_TIMEOUT_MS,
    ) -> None:
        """
        Initialize the fetcher.

        Args:
            oracle_url: Oracle endpoint; empty or None disables the oracle
            oracle_path: Path expression selecting the gwei price
            fallback: Source used when the oracle is disabled or fails
            logger: Logger receiving the fallback diagnostics
            timeout_ms: HTTP timeout for the oracle request

        Raises:
            ConfigurationError: If the URL is invalid or has no path
            MalformedPathError: If ``oracle_path`` is malformed
        """
        self._oracle_url = validate_url(oracle_url, "oracle_url") if oracle_url else ""
        self._path: Optional[JsonPath] = None
        if self._oracle_url:
            if not oracle_path:
                raise ConfigurationError(
                    "gas price oracle path is required when an oracle URL is set",
                    details={"oracle_url": self._oracle_url},
                )
            self._path = JsonPath.parse(oracle_path)
        self._fallback = fallback
        self._logger = logger or get_logger(__name__)
        self._timeout_ms = timeout_ms

    @property
    def oracle_url(self) -> str:
        return self._oracle_url

    @property
    def oracle_path(self) -> Optional[str]:
        return self._path.expression if self._path else None

    async def get_gas_price(self) -> int:
        """
        Get the gas price in wei.

        Never raises because of the oracle; only a failing fallback source
        propagates its error.
        """
        if self._path is not None:
            try:
                return await self._fetch_oracle_price(self._path)
            except OracleError as e:
                self._logger.error(
                    e.message,
                    extra={"oracle_url": self._oracle_url, "error_code": e.code},
                )
        return await self._fallback.get_gas_price()

    async def _fetch_oracle_price(self, path: JsonPath) -> int:
        url = self._oracle_url

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout_ms / 1000)
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise OracleUnreachableError(url, f"{type(e).__name__}: {e}") from e

        try:
            body = response.json()
        except ValueError:
            raise OracleResponseError(url, str(path), "a body that is not JSON") from None

        value = path.extract(body)
        amount = parse_gwei(value)
        price = gwei_to_wei(amount) if amount is not None else None
        if price is None:
            raise OracleResponseError(url, str(path), _describe(value))
        self._logger.debug(
            "Gas price from oracle",
            extra={"oracle_url": url, "gas_price": price},
        )
        return price
