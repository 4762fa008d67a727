"""
Shared constants and httpx mocks for relaykit tests.
"""

import json
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx

from relaykit.types import PingResponse


# =============================================================================
# Test Constants
# =============================================================================

RELAY_1 = "https://relay1.example.com"
RELAY_2 = "https://relay2.example.com"
RELAY_3 = "https://relay3.example.com"
RELAY_4 = "https://relay4.example.com"

WORKER_ADDRESS = "0x1234567890123456789012345678901234567890"
MANAGER_ADDRESS = "0xabcdefABCDEFabcdefABCDEFabcdefABCDEFabcd"
HUB_ADDRESS = "0x9876543210987654321098765432109876543210"

GWEI = 10**9

ETHERSCAN_ORACLE_RESPONSE = {
    "status": "1",
    "message": "OK-Missing/Invalid API Key, rate limit of 1/5sec applied",
    "result": {
        "LastBlock": "11236652",
        "SafeGasPrice": "18",
        "ProposeGasPrice": "39",
        "FastGasPrice": "54",
    },
}


def ping_payload(**overrides: Any) -> Dict[str, Any]:
    """Relay /getaddr payload in wire format."""
    payload: Dict[str, Any] = {
        "relayWorkerAddress": WORKER_ADDRESS,
        "relayManagerAddress": MANAGER_ADDRESS,
        "relayHubAddress": HUB_ADDRESS,
        "ownerAddress": MANAGER_ADDRESS,
        "minMaxPriorityFeePerGas": str(1 * GWEI),
        "minMaxFeePerGas": str(10 * GWEI),
        "maxMaxFeePerGas": str(500 * GWEI),
        "chainId": "84532",
        "networkId": "84532",
        "ready": True,
        "version": "3.0.0",
    }
    payload.update(overrides)
    return payload


def make_ping_response(**overrides: Any) -> PingResponse:
    return PingResponse.model_validate(ping_payload(**overrides))


# =============================================================================
# httpx mocking
# =============================================================================


def create_mock_response(
    status_code: int = 200,
    json_data: Any = None,
    text: str = "",
) -> MagicMock:
    """Create a mock httpx Response.

    Without ``json_data`` the body is ``text`` and ``json()`` fails the way
    httpx does for a non-JSON body.
    """
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    if json_data is not None:
        response.text = json.dumps(json_data)
        response.json.return_value = json_data
    else:
        response.text = text
        response.json.side_effect = json.JSONDecodeError("Expecting value", text, 0)

    if status_code >= 400:
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"Server error '{status_code}'",
            request=MagicMock(spec=httpx.Request),
            response=response,
        )
    else:
        response.raise_for_status.return_value = response
    return response


class MockAsyncContextManager:
    """Mock async context manager for httpx.AsyncClient."""

    def __init__(self, mock_client: AsyncMock):
        self.mock_client = mock_client

    async def __aenter__(self):
        return self.mock_client

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None


def create_mock_httpx_client(
    response: Optional[MagicMock] = None,
    side_effect: Any = None,
) -> MagicMock:
    """Create a mock httpx.AsyncClient class whose ``get`` returns ``response``.

    The returned mock exposes the inner client as ``.http``.
    """
    mock_http = AsyncMock()
    if side_effect is not None:
        mock_http.get = AsyncMock(side_effect=side_effect)
    else:
        mock_http.get = AsyncMock(return_value=response)

    def factory(*args, **kwargs):
        return MockAsyncContextManager(mock_http)

    mock_client_class = MagicMock(side_effect=factory)
    mock_client_class.http = mock_http
    return mock_client_class


