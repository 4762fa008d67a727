"""
Relay types.

PingResponse mirrors the JSON a relay server returns from ``/getaddr``.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from relaykit.types.fees import EIP1559Fees, _quantity
from relaykit.utils.validation import is_valid_address


class PingResponse(BaseModel):
    """
    Relay server ping response.

    Unknown fields are ignored so newer relays stay compatible.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    relay_worker_address: str = Field(alias="relayWorkerAddress")
    relay_manager_address: str = Field(alias="relayManagerAddress")
    relay_hub_address: str = Field(alias="relayHubAddress")
    owner_address: Optional[str] = Field(default=None, alias="ownerAddress")
    min_max_priority_fee_per_gas: int = Field(alias="minMaxPriorityFeePerGas", ge=0)
    min_max_fee_per_gas: int = Field(alias="minMaxFeePerGas", ge=0)
    max_max_fee_per_gas: Optional[int] = Field(default=None, alias="maxMaxFeePerGas", ge=0)
    chain_id: Optional[int] = Field(default=None, alias="chainId")
    network_id: Optional[int] = Field(default=None, alias="networkId")
    ready: bool
    version: str = ""

    @field_validator(
        "relay_worker_address",
        "relay_manager_address",
        "relay_hub_address",
        "owner_address",
    )
    @classmethod
    def _check_address(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not is_valid_address(v):
            raise ValueError(f"not an address: {v!r}")
        return v

    @field_validator(
        "min_max_priority_fee_per_gas",
        "min_max_fee_per_gas",
        "max_max_fee_per_gas",
        "chain_id",
        "network_id",
        mode="before",
    )
    @classmethod
    def _parse_quantity(cls, v: Any) -> Any:
        if v is None:
            return None
        return _quantity(v)

    def minimum_fees(self) -> EIP1559Fees:
        """The lowest fees this relay accepts."""
        return EIP1559Fees(
            max_priority_fee_per_gas=self.min_max_priority_fee_per_gas,
            max_fee_per_gas=self.min_max_fee_per_gas,
        )


class RelayInfo(BaseModel):
    """A relay URL and what it answered to our ping."""

    model_config = ConfigDict(frozen=True)

    relay_url: str
    ping_response: PingResponse


class RelaySelectionResult(BaseModel):
    """A relay together with the fees negotiated with it."""

    model_config = ConfigDict(frozen=True)

    relay_info: RelayInfo
    max_deviation_percent: int = Field(ge=0)
    updated_fees: EIP1559Fees

    @property
    def relay_url(self) -> str:
        return self.relay_info.relay_url
