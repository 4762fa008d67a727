"""
relaykit - relay selection and fee negotiation for meta-transaction clients.

Quick Start:
    >>> from relaykit import RelayClient, RelayClientConfig
    >>> import asyncio
    >>>
    >>> async def main():
    ...     client = await RelayClient.create(
    ...         RelayClientConfig(
    ...             preferred_relays=["https://relay1.example.com", "https://relay2.example.com"],
    ...             gas_price_oracle_url="https://api.etherscan.io/api?module=gastracker&action=gasoracle",
    ...             gas_price_oracle_path=".result.ProposeGasPrice",
    ...         ),
    ...         rpc_url="https://sepolia.base.org",
    ...     )
    ...     selection = await client.select_relay()
    ...     print(f"Relay: {selection.relay_url}")
    ...
    >>> asyncio.run(main())

Modules:
- `utils.race`: wait_for_success, the race-with-grace-period primitive
- `oracle`: GasPriceFetcher, path expressions and fallback fee sources
- `fees`: fee negotiation against relay minimums
- `relay`: RelayPinger and RelaySelector
- `client`: RelayClient facade
- `errors`: exception hierarchy
"""

from relaykit.version import __version__, __version_info__

# Client
from relaykit.client import RelayClient
from relaykit.config import RelayClientConfig

# Errors
from relaykit.errors import (
    ConfigurationError,
    DuplicateProbeKeyError,
    EmptyProbeSetError,
    FeeDeviationTooHighError,
    FeeParameterMismatchError,
    MalformedPathError,
    NoRelayAvailableError,
    OracleError,
    OracleResponseError,
    OracleUnreachableError,
    ProbeKeyMismatchError,
    RelayError,
    RelayKitError,
    RelayNotReadyError,
    RelayPingError,
    RelayRejectedError,
    ValidationError,
)

# Fees
from relaykit.fees import adjust_fee_parameter_up, adjust_fees_for_ping_response, negotiate

# Oracle
from relaykit.oracle import (
    ABSENT,
    FeeSource,
    GasPriceFetcher,
    JsonPath,
    Web3FeeSource,
    extract,
)

# Relay
from relaykit.relay import RelayPinger, RelaySelector, pick_random_element

# Types
from relaykit.types import (
    EIP1559Fees,
    FeeParameter,
    NegotiatedFeeParameter,
    NegotiationResult,
    PingResponse,
    RelayInfo,
    RelaySelectionResult,
)

# Utilities
from relaykit.utils import RaceOutcome, configure_logging, get_logger, wait_for_success

__all__ = [
    "__version__",
    "__version_info__",
    # Client
    "RelayClient",
    "RelayClientConfig",
    # Race
    "RaceOutcome",
    "wait_for_success",
    # Oracle
    "ABSENT",
    "FeeSource",
    "GasPriceFetcher",
    "JsonPath",
    "Web3FeeSource",
    "extract",
    # Fees
    "adjust_fee_parameter_up",
    "adjust_fees_for_ping_response",
    "negotiate",
    # Relay
    "RelayPinger",
    "RelaySelector",
    "pick_random_element",
    # Types
    "EIP1559Fees",
    "FeeParameter",
    "NegotiatedFeeParameter",
    "NegotiationResult",
    "PingResponse",
    "RelayInfo",
    "RelaySelectionResult",
    # Logging
    "configure_logging",
    "get_logger",
    # Errors
    "RelayKitError",
    "ConfigurationError",
    "ValidationError",
    "EmptyProbeSetError",
    "ProbeKeyMismatchError",
    "DuplicateProbeKeyError",
    "MalformedPathError",
    "FeeParameterMismatchError",
    "OracleError",
    "OracleUnreachableError",
    "OracleResponseError",
    "RelayError",
    "RelayPingError",
    "RelayNotReadyError",
    "RelayRejectedError",
    "FeeDeviationTooHighError",
    "NoRelayAvailableError",
]
