"""
RelayClient: gas price discovery and relay selection in one object.

Example:
    >>> from relaykit import RelayClient, RelayClientConfig
    >>> import asyncio
    >>>
    >>> async def main():
    ...     client = await RelayClient.create(
    ...         RelayClientConfig(preferred_relays=["https://relay.example.com"]),
    ...         rpc_url="https://sepolia.base.org",
    ...     )
    ...     selection = await client.select_relay()
    ...     print(selection.relay_url, selection.updated_fees.to_wire())
    ...
    >>> asyncio.run(main())
"""

from __future__ import annotations

import logging
import random as _random
from typing import Callable, Optional, Sequence

from web3 import AsyncWeb3

from relaykit.config import RelayClientConfig
from relaykit.errors import ConfigurationError
from relaykit.oracle import FeeSource, GasPriceFetcher, Web3FeeSource
from relaykit.relay import RelayPinger, RelaySelector
from relaykit.types import EIP1559Fees, RelaySelectionResult
from relaykit.utils.logging import get_logger

_logger = get_logger(__name__)


class RelayClient:
    """
    Client-side relay selection.

    Wires a GasPriceFetcher (oracle with on-chain fallback) to a
    RelaySelector. Selection policy is configured through
    RelayClientConfig.max_fee_deviation_percent.
    """

    def __init__(
        self,
        config: RelayClientConfig,
        *,
        web3: Optional[AsyncWeb3] = None,
        rpc_url: Optional[str] = None,
        fee_source: Optional[FeeSource] = None,
        pinger: Optional[RelayPinger] = None,
        logger: Optional[logging.Logger] = None,
        random: Callable[[], float] = _random.random,
    ) -> None:
        """
        Initialize the client.

        Note: Use `RelayClient.create()` to also verify the fee source.

        Args:
            config: Client configuration
            web3: Connected AsyncWeb3 used as the fallback fee source
            rpc_url: Node URL, used when neither ``web3`` nor ``fee_source`` is given
            fee_source: Explicit fallback fee source
            pinger: Relay pinger (built from config by default)
            logger: Logger passed down to every component
            random: ``random.random`` equivalent used to pick among relays

        Raises:
            ConfigurationError: If no fee source can be built
        """
        self._config = config
        self._logger = logger or _logger

        if fee_source is None:
            if web3 is None:
                if not rpc_url:
                    raise ConfigurationError("one of fee_source, web3 or rpc_url is required")
                web3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(rpc_url))
            fee_source = Web3FeeSource(web3)
        self._fee_source = fee_source

        self._fetcher = GasPriceFetcher(
            config.gas_price_oracle_url,
            config.gas_price_oracle_path,
            fee_source,
            logger=self._logger,
            timeout_ms=config.oracle_timeout_ms,
        )
        self._selector = RelaySelector(
            pinger or RelayPinger(
                timeout_ms=config.ping_timeout_ms,
                expected_chain_id=config.chain_id,
                logger=self._logger,
            ),
            config,
            logger=self._logger,
            random=random,
        )

    @classmethod
    async def create(cls, config: RelayClientConfig, **kwargs: object) -> "RelayClient":
        """
        Factory method that also checks the fallback fee source answers.

        Accepts the same keyword arguments as the constructor.
        """
        client = cls(config, **kwargs)  # type: ignore[arg-type]
        gas_price = await client._fee_source.get_gas_price()
        client._logger.info(
            "Relay client ready",
            extra={**config.log_fields(), "gas_price": gas_price},
        )
        return client

    @property
    def config(self) -> RelayClientConfig:
        return self._config

    @property
    def gas_price_fetcher(self) -> GasPriceFetcher:
        return self._fetcher

    @property
    def selector(self) -> RelaySelector:
        return self._selector

    async def get_desired_fees(self) -> EIP1559Fees:
        """Fees to offer relays, derived from the current gas price."""
        gas_price = await self._fetcher.get_gas_price()
        return EIP1559Fees.from_gas_price(gas_price)

    async def select_relay(
        self,
        fees: Optional[EIP1559Fees] = None,
        relay_urls: Optional[Sequence[str]] = None,
    ) -> RelaySelectionResult:
        """
        Choose a relay and the fees to pay it.

        Args:
            fees: Desired fees; fetched with ``get_desired_fees()`` if omitted
            relay_urls: Candidates; defaults to ``config.preferred_relays``

        Raises:
            NoRelayAvailableError: If no candidate is responsive and acceptable
        """
        if fees is None:
            fees = await self.get_desired_fees()
        candidates = self._config.preferred_relays if relay_urls is None else relay_urls
        return await self._selector.select_relay(candidates, fees)
