"""
Baseline fee sources.

A fee source is anything that can report the current gas price in wei.
GasPriceFetcher falls back to one whenever its oracle cannot be used.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from web3 import AsyncWeb3


@runtime_checkable
class FeeSource(Protocol):
    """Provider of a baseline gas price, in wei."""

    async def get_gas_price(self) -> int:
        ...


class Web3FeeSource:
    """
    Fee source backed by the node's ``eth_gasPrice`` RPC method.

    Example:
        ```python
        w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider("https://sepolia.base.org"))
        source = Web3FeeSource(w3)
        gas_price = await source.get_gas_price()
        ```
    """

    def __init__(self, web3: AsyncWeb3) -> None:
        self._web3 = web3

    @property
    def web3(self) -> AsyncWeb3:
        return self._web3

    async def get_gas_price(self) -> int:
        return int(await self._web3.eth.gas_price)
