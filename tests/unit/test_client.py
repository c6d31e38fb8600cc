"""Unit tests for the Bitrix facade."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from b24.client import (
    Bitrix,
    BatchPayload,
    CallPayload,
    Command,
    Method,
    MethodNotListableError,
    PagePolicy,
    RESTTransport,
)


@pytest.fixture
def transport():
    transport = MagicMock(spec=RESTTransport)
    transport.call = AsyncMock(
        return_value=CallPayload(result=[{"ID": "1"}, {"ID": "2"}], total=3, next=2)
    )
    transport.batch = AsyncMock(
        return_value=BatchPayload(
            result={"0": [{"ID": "1"}, {"ID": "2"}], "1": [{"ID": "3"}]},
            result_total={"0": 3, "1": 3},
            result_next={"0": 2, "1": None},
            result_error={"0": "", "1": ""},
        )
    )
    transport.close = AsyncMock()
    return transport


class TestBitrix:
    """Test Bitrix client wiring."""

    @pytest.mark.asyncio
    async def test_call_accepts_method_enum(self, transport):
        client = Bitrix("https://portal.example.com/rest/", transport=transport)

        await client.call(Method.DEAL_GET, {"id": 1})

        transport.call.assert_awaited_once_with("crm.deal.get", {"id": 1})

    @pytest.mark.asyncio
    async def test_batch_delegates(self, transport):
        client = Bitrix("https://portal.example.com/rest/", transport=transport)
        commands = [Command("crm.deal.get", {"id": 1})]

        payload = await client.batch(commands)

        assert payload is transport.batch.return_value
        transport.batch.assert_awaited_once_with(commands)

    @pytest.mark.asyncio
    async def test_batch_sends_method_members_by_value(self):
        """Test commands built from Method members reach the wire by value."""
        client = Bitrix("https://portal.example.com/rest/")
        client._transport._http.post = AsyncMock(
            return_value={"result": {"result": {"0": {"ID": "1"}}}, "time": {}}
        )

        await client.batch([Command(Method.DEAL_GET, {"id": 1})])

        sent = client._transport._http.post.await_args.kwargs["json"]
        assert sent["cmd"] == {"0": "crm.deal.get?id=1"}

    @pytest.mark.asyncio
    async def test_list_uses_transport_collaborators(self, transport):
        client = Bitrix(
            "https://portal.example.com/rest/",
            transport=transport,
            policy=PagePolicy(page_size=2),
        )

        payload = await client.list(Method.DEAL_LIST, {"select": ["ID"]})

        assert [entry["ID"] for entry in payload.result] == ["1", "2", "3"]
        assert payload.total == 3
        assert payload.error == "\n"
        commands = transport.batch.await_args.args[0]
        assert [c.params["start"] for c in commands] == [0, 2]

    @pytest.mark.asyncio
    async def test_list_rejects_non_listable(self, transport):
        client = Bitrix("https://portal.example.com/rest/", transport=transport)

        with pytest.raises(MethodNotListableError):
            await client.list("crm.deal.update", {"id": 1})

        transport.call.assert_not_called()

    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self, transport):
        async with Bitrix("https://portal.example.com/rest/", transport=transport):
            pass

        transport.close.assert_awaited_once()

    def test_default_transport(self):
        client = Bitrix("https://portal.example.com/rest/1/secret", access_token="tok")
        assert isinstance(client._transport, RESTTransport)
        assert client._transport._access_token == "tok"
