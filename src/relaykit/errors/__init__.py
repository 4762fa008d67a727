"""
Exception hierarchy for relaykit.

RelayKitError
├── ConfigurationError
│   ├── ValidationError
│   ├── EmptyProbeSetError
│   ├── ProbeKeyMismatchError
│   ├── DuplicateProbeKeyError
│   ├── MalformedPathError
│   └── FeeParameterMismatchError
├── OracleError
│   ├── OracleUnreachableError
│   └── OracleResponseError
└── RelayError
    ├── RelayPingError
    ├── RelayNotReadyError
    ├── RelayRejectedError
    │   └── FeeDeviationTooHighError
    └── NoRelayAvailableError
"""

from relaykit.errors.base import RelayKitError
from relaykit.errors.config import (
    ConfigurationError,
    DuplicateProbeKeyError,
    EmptyProbeSetError,
    FeeParameterMismatchError,
    MalformedPathError,
    ProbeKeyMismatchError,
    ValidationError,
)
from relaykit.errors.oracle import (
    OracleError,
    OracleResponseError,
    OracleUnreachableError,
)
from relaykit.errors.relay import (
    FeeDeviationTooHighError,
    NoRelayAvailableError,
    RelayError,
    RelayNotReadyError,
    RelayPingError,
    RelayRejectedError,
)

__all__ = [
    "RelayKitError",
    # Configuration
    "ConfigurationError",
    "ValidationError",
    "EmptyProbeSetError",
    "ProbeKeyMismatchError",
    "DuplicateProbeKeyError",
    "MalformedPathError",
    "FeeParameterMismatchError",
    # Oracle
    "OracleError",
    "OracleUnreachableError",
    "OracleResponseError",
    # Relay
    "RelayError",
    "RelayPingError",
    "RelayNotReadyError",
    "RelayRejectedError",
    "FeeDeviationTooHighError",
    "NoRelayAvailableError",
]
