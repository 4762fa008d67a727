"""
Relay pinger.

A ping is a GET of ``<relay_url>/getaddr``. The relay answers with its
addresses, readiness and the minimum fees it accepts.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from relaykit.errors import RelayNotReadyError, RelayPingError
from relaykit.types import PingResponse, RelayInfo
from relaykit.utils.logging import get_logger

PING_PATH = "/getaddr"


class RelayPinger:
    """
    Ping relays over HTTP.

    Each ping carries its own timeout so that pings abandoned by a race
    still terminate.

    Example:
        ```python
        pinger = RelayPinger(timeout_ms=5000, expected_chain_id=84532)
        info = await pinger.ping("https://relay.example.com")
        print(info.ping_response.min_max_fee_per_gas)
        ```
    """

    def __init__(
        self,
        *,
        timeout_ms: int = 10000,
        expected_chain_id: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._timeout_ms = timeout_ms
        self._expected_chain_id = expected_chain_id
        self._logger = logger or get_logger(__name__)

    async def ping(self, relay_url: str) -> RelayInfo:
        """
        Ping one relay.

        Raises:
            RelayPingError: On transport errors, HTTP errors, invalid
                payloads or a chain id mismatch
            RelayNotReadyError: If the relay reports it is not ready
        """
        url = relay_url.rstrip("/") + PING_PATH
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout_ms / 1000)
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise RelayPingError(relay_url, f"{type(e).__name__}: {e}") from e

        try:
            ping_response = PingResponse.model_validate(response.json())
        except ValueError as e:
            # PydanticValidationError is a ValueError too; keep its summary short
            if isinstance(e, PydanticValidationError):
                reason = f"invalid ping response ({e.error_count()} errors)"
            else:
                reason = "ping response is not JSON"
            raise RelayPingError(relay_url, reason) from e

        if not ping_response.ready:
            raise RelayNotReadyError(relay_url)

        if (
            self._expected_chain_id is not None
            and ping_response.chain_id is not None
            and ping_response.chain_id != self._expected_chain_id
        ):
            raise RelayPingError(
                relay_url,
                f"wrong chain id {ping_response.chain_id}, expected {self._expected_chain_id}",
            )

        self._logger.debug(
            "Relay ping ok",
            extra={
                "relay_url": relay_url,
                "version": ping_response.version,
                "min_max_fee_per_gas": ping_response.min_max_fee_per_gas,
            },
        )
        return RelayInfo(relay_url=relay_url, ping_response=ping_response)
