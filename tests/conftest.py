"""
Shared fixtures for relaykit tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from relaykit.types import EIP1559Fees

from helpers import GWEI


@pytest.fixture
def fallback_source() -> MagicMock:
    """Fee source returning 12 gwei."""
    source = MagicMock()
    source.get_gas_price = AsyncMock(return_value=12 * GWEI)
    return source


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def desired_fees() -> EIP1559Fees:
    return EIP1559Fees(max_priority_fee_per_gas=1 * GWEI, max_fee_per_gas=10 * GWEI)
