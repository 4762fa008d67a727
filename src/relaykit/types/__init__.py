"""
Type definitions for relaykit.

Fee types:
- FeeParameter, NegotiatedFeeParameter, NegotiationResult
- EIP1559Fees

Relay types:
- PingResponse, RelayInfo, RelaySelectionResult
"""

from relaykit.types.fees import (
    MAX_FEE_PER_GAS,
    MAX_PRIORITY_FEE_PER_GAS,
    EIP1559Fees,
    FeeParameter,
    NegotiatedFeeParameter,
    NegotiationResult,
)
from relaykit.types.relay import PingResponse, RelayInfo, RelaySelectionResult

__all__ = [
    "MAX_FEE_PER_GAS",
    "MAX_PRIORITY_FEE_PER_GAS",
    "EIP1559Fees",
    "FeeParameter",
    "NegotiatedFeeParameter",
    "NegotiationResult",
    "PingResponse",
    "RelayInfo",
    "RelaySelectionResult",
]
