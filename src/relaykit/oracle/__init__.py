"""
Gas price oracle.

Example:
    ```python
    from relaykit.oracle import GasPriceFetcher, Web3FeeSource

    fetcher = GasPriceFetcher(oracle_url, ".result.ProposeGasPrice", Web3FeeSource(w3))
    gas_price = await fetcher.get_gas_price()
    ```
"""

from relaykit.oracle.fetcher import GWEI, GasPriceFetcher, gwei_to_wei, parse_gwei
from relaykit.oracle.path import (
    ABSENT,
    IndexSegment,
    JsonPath,
    PropertySegment,
    Segment,
    extract,
    parse_path,
)
from relaykit.oracle.sources import FeeSource, Web3FeeSource

__all__ = [
    "GWEI",
    "GasPriceFetcher",
    "parse_gwei",
    "gwei_to_wei",
    "ABSENT",
    "JsonPath",
    "PropertySegment",
    "IndexSegment",
    "Segment",
    "extract",
    "parse_path",
    "FeeSource",
    "Web3FeeSource",
]
