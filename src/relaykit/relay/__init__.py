"""
Relay discovery: pinging candidates and choosing one.

Example:
    ```python
    from relaykit.relay import RelayPinger, RelaySelector

    selector = RelaySelector(RelayPinger(timeout_ms=5000), config)
    selection = await selector.select_relay(urls, fees)
    ```
"""

from relaykit.relay.pinger import PING_PATH, RelayPinger
from relaykit.relay.selector import RelaySelector, pick_random_element

__all__ = [
    "PING_PATH",
    "RelayPinger",
    "RelaySelector",
    "pick_random_element",
]
