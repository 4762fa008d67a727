"""
Fee types.

All fee values are base-unit integers (wei). Wire payloads may encode
them as decimal strings, 0x-hex strings or JSON numbers; the models
normalize them to ``int``.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from relaykit.errors import ValidationError
from relaykit.utils.validation import parse_quantity

MAX_PRIORITY_FEE_PER_GAS = "maxPriorityFeePerGas"
MAX_FEE_PER_GAS = "maxFeePerGas"


def _quantity(value: Any) -> int:
    # pydantic only converts ValueError into its own validation errors
    try:
        return parse_quantity(value)
    except ValidationError as e:
        raise ValueError(e.message) from None


class FeeParameter(BaseModel):
    """A named fee quantity, e.g. ``maxFeePerGas``."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    value: int = Field(ge=0, description="Value in wei")

    @field_validator("value", mode="before")
    @classmethod
    def _parse_value(cls, v: Any) -> int:
        return _quantity(v)


class NegotiatedFeeParameter(BaseModel):
    """
    Outcome of negotiating one fee parameter.

    ``value`` is the larger of ``desired`` and ``minimum``;
    ``deviation_percent`` is how far it moved up from ``desired``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    desired: int = Field(ge=0)
    minimum: int = Field(ge=0)
    value: int = Field(ge=0)
    deviation_percent: int = Field(ge=0)

    @property
    def adjusted(self) -> bool:
        return self.value != self.desired


class NegotiationResult(BaseModel):
    """Negotiated parameters plus the worst deviation among them."""

    model_config = ConfigDict(frozen=True)

    parameters: Tuple[NegotiatedFeeParameter, ...] = ()
    max_deviation_percent: int = Field(default=0, ge=0)

    @property
    def values(self) -> Dict[str, int]:
        """Resolved value of every parameter, by name."""
        return {p.name: p.value for p in self.parameters}

    def __getitem__(self, name: str) -> NegotiatedFeeParameter:
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        raise KeyError(name)


class EIP1559Fees(BaseModel):
    """
    EIP-1559 fee pair.

    Accepts both snake_case and the camelCase wire names.

    Example:
        >>> EIP1559Fees.model_validate({"maxPriorityFeePerGas": "0x3b9aca00",
        ...                             "maxFeePerGas": "2000000000"})
        EIP1559Fees(max_priority_fee_per_gas=1000000000, max_fee_per_gas=2000000000)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    max_priority_fee_per_gas: int = Field(alias=MAX_PRIORITY_FEE_PER_GAS, ge=0)
    max_fee_per_gas: int = Field(alias=MAX_FEE_PER_GAS, ge=0)

    @field_validator("max_priority_fee_per_gas", "max_fee_per_gas", mode="before")
    @classmethod
    def _parse_fee(cls, v: Any) -> int:
        return _quantity(v)

    @classmethod
    def from_gas_price(cls, gas_price: int) -> "EIP1559Fees":
        """Legacy-style fees: both values equal to ``gas_price``."""
        return cls(max_priority_fee_per_gas=gas_price, max_fee_per_gas=gas_price)

    def to_fee_parameters(self) -> Tuple[FeeParameter, ...]:
        return (
            FeeParameter(name=MAX_PRIORITY_FEE_PER_GAS, value=self.max_priority_fee_per_gas),
            FeeParameter(name=MAX_FEE_PER_GAS, value=self.max_fee_per_gas),
        )

    def to_wire(self) -> Dict[str, str]:
        """Hex-encoded values keyed by wire name, as sent to relays."""
        return {
            MAX_PRIORITY_FEE_PER_GAS: hex(self.max_priority_fee_per_gas),
            MAX_FEE_PER_GAS: hex(self.max_fee_per_gas),
        }
