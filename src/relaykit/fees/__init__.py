"""Fee negotiation between a client and a relay."""

from relaykit.fees.negotiator import (
    ZERO_DESIRED_DEVIATION_PERCENT,
    adjust_fee_parameter_up,
    adjust_fees_for_ping_response,
    deviation_percent,
    negotiate,
)

__all__ = [
    "ZERO_DESIRED_DEVIATION_PERCENT",
    "adjust_fee_parameter_up",
    "adjust_fees_for_ping_response",
    "deviation_percent",
    "negotiate",
]
