"""
Relay selection.

Candidates are pinged a slice at a time. Within a slice the pings race
with a grace period; every relay that answered in time is negotiated with,
and those whose fee demands stay within tolerance are eligible. One
eligible relay is then picked at random so that load spreads across
equally good relays.
"""

from __future__ import annotations

import logging
import random as _random
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from relaykit.config import RelayClientConfig
from relaykit.errors import (
    FeeDeviationTooHighError,
    NoRelayAvailableError,
    RelayRejectedError,
)
from relaykit.fees import adjust_fees_for_ping_response
from relaykit.relay.pinger import RelayPinger
from relaykit.types import EIP1559Fees, RelayInfo, RelaySelectionResult
from relaykit.utils.logging import get_logger
from relaykit.utils.race import wait_for_success
from relaykit.utils.validation import is_valid_relay_url

T = TypeVar("T")

RandomFn = Callable[[], float]


def pick_random_element(items: Sequence[T], random: RandomFn = _random.random) -> T:
    """
    Pick one element using ``random`` (a ``random.random`` equivalent).

    Raises:
        IndexError: If ``items`` is empty
    """
    if not items:
        raise IndexError("cannot pick from an empty sequence")
    return items[int(random() * len(items))]


class RelaySelector:
    """
    Pick a responsive relay that accepts our fees.

    Example:
        ```python
        selector = RelaySelector(RelayPinger(), config)
        selection = await selector.select_relay(config.preferred_relays, fees)
        print(selection.relay_url, selection.updated_fees)
        ```
    """

    def __init__(
        self,
        pinger: RelayPinger,
        config: Optional[RelayClientConfig] = None,
        *,
        logger: Optional[logging.Logger] = None,
        random: RandomFn = _random.random,
    ) -> None:
        self._pinger = pinger
        self._config = config or RelayClientConfig()
        self._logger = logger or get_logger(__name__)
        self._random = random
        self._last_errors: Dict[str, BaseException] = {}

    def _candidates(self, relay_urls: Sequence[str]) -> List[str]:
        seen = set()
        candidates = []
        for url in relay_urls:
            if not is_valid_relay_url(url):
                self._logger.warning("Skipping invalid relay URL", extra={"relay_url": url})
                continue
            if url in seen:
                continue
            seen.add(url)
            candidates.append(url)
        return candidates

    def _evaluate(self, info: RelayInfo, fees: EIP1559Fees) -> RelaySelectionResult:
        """Negotiate with one relay and apply the caller's tolerance."""
        selection = adjust_fees_for_ping_response(fees, info)
        tolerance = self._config.max_fee_deviation_percent
        if selection.max_deviation_percent > tolerance:
            raise FeeDeviationTooHighError(info.relay_url, selection.max_deviation_percent, tolerance)

        max_max_fee = info.ping_response.max_max_fee_per_gas
        if max_max_fee is not None and selection.updated_fees.max_fee_per_gas > max_max_fee:
            raise RelayRejectedError(
                info.relay_url,
                f"max fee {selection.updated_fees.max_fee_per_gas} above relay limit {max_max_fee}",
            )
        return selection

    @property
    def last_errors(self) -> Dict[str, BaseException]:
        """Failures recorded by the most recent selection, by relay URL."""
        return dict(self._last_errors)

    async def race_slice(self, relay_urls: Sequence[str]) -> List[RelayInfo]:
        """Ping one slice of relays and return the ones that answered in time."""
        outcome = await wait_for_success(
            [self._pinger.ping(url) for url in relay_urls],
            list(relay_urls),
            self._config.wait_for_success_ping_grace_ms,
        )
        for url, error in outcome.errors.items():
            self._logger.info("Relay ping failed", extra={"relay_url": url, "error": str(error)})
        self._last_errors.update(outcome.errors)
        return outcome.results

    async def select_relay(
        self,
        relay_urls: Sequence[str],
        fees: EIP1559Fees,
    ) -> RelaySelectionResult:
        """
        Select a relay for a transaction paying ``fees``.

        Args:
            relay_urls: Candidates, most preferred first
            fees: Fees the client would like to pay

        Returns:
            The chosen relay and the fees adjusted to its minimums

        Raises:
            NoRelayAvailableError: If no candidate is responsive and acceptable
        """
        candidates = self._candidates(relay_urls)
        self._last_errors = {}
        slice_size = self._config.wait_for_success_slice_size

        for start in range(0, len(candidates), slice_size):
            relay_slice = candidates[start:start + slice_size]
            acceptable: List[RelaySelectionResult] = []
            for info in await self.race_slice(relay_slice):
                try:
                    acceptable.append(self._evaluate(info, fees))
                except RelayRejectedError as e:
                    self._logger.info(
                        "Relay rejected",
                        extra={"relay_url": info.relay_url, "reason": e.reason},
                    )
                    self._last_errors[info.relay_url] = e

            if acceptable:
                selection = pick_random_element(acceptable, self._random)
                self._logger.info(
                    "Relay selected",
                    extra={
                        "relay_url": selection.relay_url,
                        "max_deviation_percent": selection.max_deviation_percent,
                        "eligible": len(acceptable),
                    },
                )
                return selection

        self._logger.warning(
            "No relay available",
            extra={"candidates": len(candidates), "failed": len(self._last_errors)},
        )
        raise NoRelayAvailableError(self._last_errors)
