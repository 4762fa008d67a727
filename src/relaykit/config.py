"""
Client configuration.

Defaults follow the usual relay-network settings: relays are pinged three
at a time, and once one answers the others get three more seconds.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from relaykit.errors import ConfigurationError
from relaykit.oracle.fetcher import DEFAULT_ORACLE_TIMEOUT_MS
from relaykit.oracle.path import parse_path
from relaykit.utils.validation import validate_url

DEFAULT_SLICE_SIZE = 3
DEFAULT_PING_GRACE_MS = 3000
DEFAULT_PING_TIMEOUT_MS = 10000
DEFAULT_MAX_FEE_DEVIATION_PERCENT = 20


class RelayClientConfig(BaseModel):
    """
    Configuration for relay selection and gas price discovery.

    Example:
        ```python
        config = RelayClientConfig(
            preferred_relays=["https://relay1.example.com", "https://relay2.example.com"],
            gas_price_oracle_url="https://api.etherscan.io/api?module=gastracker&action=gasoracle",
            gas_price_oracle_path=".result.ProposeGasPrice",
            max_fee_deviation_percent=30,
        )
        ```
    """

    model_config = ConfigDict(frozen=True)

    preferred_relays: Tuple[str, ...] = Field(
        default=(),
        description="Candidate relay URLs, most preferred first",
    )
    chain_id: Optional[int] = Field(
        default=None,
        ge=1,
        description="Reject relays reporting a different chain id",
    )
    gas_price_oracle_url: str = Field(
        default="",
        description="HTTP gas price oracle; empty uses the node's gas price",
    )
    gas_price_oracle_path: str = Field(
        default="",
        description="Path expression selecting the gwei price in the oracle response",
    )
    oracle_timeout_ms: int = Field(
        default=DEFAULT_ORACLE_TIMEOUT_MS,
        ge=100,
        description="Oracle request timeout in ms",
    )
    ping_timeout_ms: int = Field(
        default=DEFAULT_PING_TIMEOUT_MS,
        ge=100,
        description="Relay ping timeout in ms; bounds how long stragglers live",
    )
    wait_for_success_slice_size: int = Field(
        default=DEFAULT_SLICE_SIZE,
        ge=1,
        description="Number of relays pinged concurrently",
    )
    wait_for_success_ping_grace_ms: int = Field(
        default=DEFAULT_PING_GRACE_MS,
        ge=0,
        description="Extra time to collect pings after the first answer",
    )
    max_fee_deviation_percent: int = Field(
        default=DEFAULT_MAX_FEE_DEVIATION_PERCENT,
        ge=0,
        description="Largest fee increase a relay may demand, in percent",
    )

    @field_validator("preferred_relays", mode="before")
    @classmethod
    def _coerce_relays(cls, v: Any) -> Any:
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator("gas_price_oracle_url")
    @classmethod
    def _check_oracle_url(cls, v: str) -> str:
        if not v:
            return v
        try:
            return validate_url(v, "gas_price_oracle_url")
        except ConfigurationError as e:
            raise ValueError(e.message) from None

    @field_validator("gas_price_oracle_path")
    @classmethod
    def _check_oracle_path(cls, v: str) -> str:
        if not v:
            return v
        try:
            parse_path(v)
        except ConfigurationError as e:
            raise ValueError(e.message) from None
        return v

    @model_validator(mode="after")
    def _oracle_needs_path(self) -> "RelayClientConfig":
        if self.gas_price_oracle_url and not self.gas_price_oracle_path:
            raise ValueError("gas_price_oracle_path is required when gas_price_oracle_url is set")
        return self

    def log_fields(self) -> Dict[str, Any]:
        """Non-sensitive summary for log records."""
        return {
            "relays": len(self.preferred_relays),
            "chain_id": self.chain_id,
            "oracle": bool(self.gas_price_oracle_url),
            "slice_size": self.wait_for_success_slice_size,
            "ping_grace_ms": self.wait_for_success_ping_grace_ms,
            "max_fee_deviation_percent": self.max_fee_deviation_percent,
        }
