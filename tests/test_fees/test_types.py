"""
Tests for fee and relay types.

Tests cover:
- Wire encodings of quantities (decimal, hex, int)
- camelCase aliases
- PingResponse parsing and defaults
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from relaykit.types import (
    MAX_FEE_PER_GAS,
    MAX_PRIORITY_FEE_PER_GAS,
    EIP1559Fees,
    FeeParameter,
    PingResponse,
)

from helpers import GWEI, HUB_ADDRESS, ping_payload


class TestFeeParameter:
    def test_parses_hex(self) -> None:
        assert FeeParameter(name="maxFeePerGas", value="0x3b9aca00").value == GWEI

    def test_rejects_negative(self) -> None:
        with pytest.raises(PydanticValidationError):
            FeeParameter(name="maxFeePerGas", value=-1)

    def test_rejects_garbage(self) -> None:
        with pytest.raises(PydanticValidationError):
            FeeParameter(name="maxFeePerGas", value="lots")

    def test_is_frozen(self) -> None:
        param = FeeParameter(name="a", value=1)
        with pytest.raises(PydanticValidationError):
            param.value = 2


class TestEIP1559Fees:
    def test_wire_names(self) -> None:
        fees = EIP1559Fees.model_validate(
            {"maxPriorityFeePerGas": "0x3b9aca00", "maxFeePerGas": "2000000000"}
        )

        assert fees.max_priority_fee_per_gas == GWEI
        assert fees.max_fee_per_gas == 2 * GWEI

    def test_from_gas_price(self) -> None:
        fees = EIP1559Fees.from_gas_price(7 * GWEI)
        assert fees.max_priority_fee_per_gas == fees.max_fee_per_gas == 7 * GWEI

    def test_to_fee_parameters(self) -> None:
        fees = EIP1559Fees(max_priority_fee_per_gas=1, max_fee_per_gas=2)
        assert [(p.name, p.value) for p in fees.to_fee_parameters()] == [
            (MAX_PRIORITY_FEE_PER_GAS, 1),
            (MAX_FEE_PER_GAS, 2),
        ]

    def test_to_wire(self) -> None:
        fees = EIP1559Fees(max_priority_fee_per_gas=GWEI, max_fee_per_gas=16)
        assert fees.to_wire() == {"maxPriorityFeePerGas": "0x3b9aca00", "maxFeePerGas": "0x10"}


class TestPingResponse:
    def test_parses_wire_payload(self) -> None:
        response = PingResponse.model_validate(ping_payload(maxMaxFeePerGas="0x" + "f" * 4))

        assert response.relay_hub_address == HUB_ADDRESS
        assert response.min_max_priority_fee_per_gas == GWEI
        assert response.min_max_fee_per_gas == 10 * GWEI
        assert response.max_max_fee_per_gas == 0xFFFF
        assert response.chain_id == 84532
        assert response.ready is True

    def test_optional_fields(self) -> None:
        payload = ping_payload()
        for key in ("maxMaxFeePerGas", "chainId", "networkId", "ownerAddress", "version"):
            payload.pop(key)

        response = PingResponse.model_validate(payload)

        assert response.max_max_fee_per_gas is None
        assert response.chain_id is None
        assert response.version == ""

    def test_unknown_fields_ignored(self) -> None:
        response = PingResponse.model_validate(ping_payload(maxAcceptanceBudget="285252"))
        assert not hasattr(response, "maxAcceptanceBudget")

    def test_missing_minimum_fee(self) -> None:
        payload = ping_payload()
        payload.pop("minMaxFeePerGas")
        with pytest.raises(PydanticValidationError):
            PingResponse.model_validate(payload)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("relayWorkerAddress", "0x123"),
            ("relayManagerAddress", "relay-manager"),
            ("relayHubAddress", ""),
            ("ownerAddress", "1234567890123456789012345678901234567890"),
        ],
    )
    def test_rejects_invalid_address(self, field: str, value: str) -> None:
        with pytest.raises(PydanticValidationError, match="not an address"):
            PingResponse.model_validate(ping_payload(**{field: value}))

    def test_minimum_fees(self) -> None:
        fees = PingResponse.model_validate(ping_payload()).minimum_fees()
        assert fees == EIP1559Fees(max_priority_fee_per_gas=GWEI, max_fee_per_gas=10 * GWEI)
