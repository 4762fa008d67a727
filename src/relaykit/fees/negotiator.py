"""
Fee negotiation.

A relay advertises the minimum fees it accepts. The client raises each of
its desired fees to at least that minimum and records, per parameter, how
far it had to move in percent. The worst of those deviations is what a
caller compares against its tolerance; negotiation itself never rejects.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List

from relaykit.errors import FeeParameterMismatchError
from relaykit.types import (
    EIP1559Fees,
    FeeParameter,
    MAX_FEE_PER_GAS,
    MAX_PRIORITY_FEE_PER_GAS,
    NegotiatedFeeParameter,
    NegotiationResult,
    RelayInfo,
    RelaySelectionResult,
)

ZERO_DESIRED_DEVIATION_PERCENT = 100
"""Deviation reported when a zero desired value has to be raised."""


def deviation_percent(desired: int, minimum: int) -> int:
    """
    Percentage increase from ``desired`` to ``minimum``, rounded half up.

    Returns 0 when no increase is needed.

    Example:
        >>> deviation_percent(100, 150)
        50
        >>> deviation_percent(3, 4)
        33
    """
    if desired >= minimum:
        return 0
    if desired == 0:
        return ZERO_DESIRED_DEVIATION_PERCENT
    # round(x) for x = n / d > 0, half up: floor((2n + d) / 2d)
    numerator = (minimum - desired) * 100
    return (2 * numerator + desired) // (2 * desired)


def adjust_fee_parameter_up(desired: int, minimum: int, name: str = "") -> NegotiatedFeeParameter:
    """
    Raise ``desired`` to ``minimum`` if it is below it.

    Args:
        desired: Value the client wants to pay
        minimum: Lowest value the server accepts
        name: Parameter name carried into the result

    Returns:
        Resolved value and its deviation from ``desired``
    """
    if desired >= minimum:
        value = desired
    else:
        value = minimum
    return NegotiatedFeeParameter(
        name=name,
        desired=desired,
        minimum=minimum,
        value=value,
        deviation_percent=deviation_percent(desired, minimum),
    )


def _by_name(parameters: Iterable[FeeParameter], side: str) -> Dict[str, int]:
    parameters = list(parameters)
    duplicates = [n for n, c in Counter(p.name for p in parameters).items() if c > 1]
    if duplicates:
        raise FeeParameterMismatchError(
            f"duplicate {side} fee parameters: {', '.join(sorted(duplicates))}",
            names=duplicates,
        )
    return {p.name: p.value for p in parameters}


def negotiate(
    client_desired: Iterable[FeeParameter],
    server_minimums: Iterable[FeeParameter],
) -> NegotiationResult:
    """
    Negotiate every client fee parameter against the server minimums.

    Parameters are paired by name. Server parameters the client did not ask
    about are ignored.

    Args:
        client_desired: Fees the client would like to pay
        server_minimums: Minimum fees declared by the server

    Returns:
        Negotiated parameters in client order and the maximum deviation

    Raises:
        FeeParameterMismatchError: If a client parameter has no server
            counterpart or a name is repeated on either side
    """
    desired = _by_name(client_desired, "client")
    minimums = _by_name(server_minimums, "server")

    missing = [name for name in desired if name not in minimums]
    if missing:
        raise FeeParameterMismatchError(
            f"server declares no minimum for: {', '.join(missing)}",
            names=missing,
        )

    negotiated: List[NegotiatedFeeParameter] = [
        adjust_fee_parameter_up(value, minimums[name], name)
        for name, value in desired.items()
    ]
    return NegotiationResult(
        parameters=tuple(negotiated),
        max_deviation_percent=max((p.deviation_percent for p in negotiated), default=0),
    )


def adjust_fees_for_ping_response(fees: EIP1559Fees, relay_info: RelayInfo) -> RelaySelectionResult:
    """
    Adjust EIP-1559 fees to satisfy the minimums a relay declared in its ping.

    The caller decides whether ``max_deviation_percent`` is acceptable.
    """
    result = negotiate(
        fees.to_fee_parameters(),
        relay_info.ping_response.minimum_fees().to_fee_parameters(),
    )
    return RelaySelectionResult(
        relay_info=relay_info,
        max_deviation_percent=result.max_deviation_percent,
        updated_fees=EIP1559Fees(
            max_priority_fee_per_gas=result[MAX_PRIORITY_FEE_PER_GAS].value,
            max_fee_per_gas=result[MAX_FEE_PER_GAS].value,
        ),
    )
