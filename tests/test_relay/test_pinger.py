"""
Tests for RelayPinger.
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from relaykit.errors import RelayError, RelayNotReadyError, RelayPingError
from relaykit.relay.pinger import RelayPinger

from helpers import (
    GWEI,
    RELAY_1,
    create_mock_httpx_client,
    create_mock_response,
    ping_payload,
)

HTTPX_PATCH = "relaykit.relay.pinger.httpx.AsyncClient"


class TestRelayPinger:
    @pytest.mark.asyncio
    async def test_ping_ok(self, mock_logger: MagicMock) -> None:
        mock_client = create_mock_httpx_client(create_mock_response(json_data=ping_payload()))
        pinger = RelayPinger(timeout_ms=2000, logger=mock_logger)

        with patch(HTTPX_PATCH, mock_client):
            info = await pinger.ping(RELAY_1)

        assert info.relay_url == RELAY_1
        assert info.ping_response.min_max_fee_per_gas == 10 * GWEI
        mock_client.http.get.assert_awaited_once_with(f"{RELAY_1}/getaddr")
        mock_logger.debug.assert_called_once()

    @pytest.mark.asyncio
    async def test_trailing_slash(self) -> None:
        mock_client = create_mock_httpx_client(create_mock_response(json_data=ping_payload()))

        with patch(HTTPX_PATCH, mock_client):
            info = await RelayPinger().ping(RELAY_1 + "/")

        mock_client.http.get.assert_awaited_once_with(f"{RELAY_1}/getaddr")
        assert info.relay_url == RELAY_1 + "/"

    @pytest.mark.asyncio
    async def test_not_ready(self) -> None:
        mock_client = create_mock_httpx_client(
            create_mock_response(json_data=ping_payload(ready=False))
        )

        with patch(HTTPX_PATCH, mock_client):
            with pytest.raises(RelayNotReadyError) as exc_info:
                await RelayPinger().ping(RELAY_1)

        assert exc_info.value.relay_url == RELAY_1

    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        mock_client = create_mock_httpx_client(side_effect=httpx.ConnectError("refused"))

        with patch(HTTPX_PATCH, mock_client):
            with pytest.raises(RelayPingError) as exc_info:
                await RelayPinger().ping(RELAY_1)

        assert "ConnectError" in exc_info.value.reason
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_http_error(self) -> None:
        mock_client = create_mock_httpx_client(create_mock_response(status_code=500, text="oops"))

        with patch(HTTPX_PATCH, mock_client):
            with pytest.raises(RelayPingError, match="HTTPStatusError"):
                await RelayPinger().ping(RELAY_1)

    @pytest.mark.asyncio
    async def test_not_json(self) -> None:
        mock_client = create_mock_httpx_client(create_mock_response(text="<html>"))

        with patch(HTTPX_PATCH, mock_client):
            with pytest.raises(RelayPingError, match="not JSON"):
                await RelayPinger().ping(RELAY_1)

    @pytest.mark.asyncio
    async def test_invalid_payload(self) -> None:
        mock_client = create_mock_httpx_client(create_mock_response(json_data={"ready": True}))

        with patch(HTTPX_PATCH, mock_client):
            with pytest.raises(RelayPingError, match="invalid ping response"):
                await RelayPinger().ping(RELAY_1)

    @pytest.mark.asyncio
    async def test_invalid_worker_address(self) -> None:
        mock_client = create_mock_httpx_client(
            create_mock_response(json_data=ping_payload(relayWorkerAddress="0xdead"))
        )

        with patch(HTTPX_PATCH, mock_client):
            with pytest.raises(RelayPingError, match="invalid ping response"):
                await RelayPinger().ping(RELAY_1)

    @pytest.mark.asyncio
    async def test_wrong_chain(self) -> None:
        mock_client = create_mock_httpx_client(
            create_mock_response(json_data=ping_payload(chainId="1"))
        )

        with patch(HTTPX_PATCH, mock_client):
            with pytest.raises(RelayPingError, match="wrong chain id 1"):
                await RelayPinger(expected_chain_id=84532).ping(RELAY_1)

    @pytest.mark.asyncio
    async def test_errors_are_relay_errors(self) -> None:
        mock_client = create_mock_httpx_client(side_effect=httpx.ReadTimeout("slow"))

        with patch(HTTPX_PATCH, mock_client):
            with pytest.raises(RelayError):
                await RelayPinger(timeout_ms=100).ping(RELAY_1)
