import pytest

import cli
from mizu import MizuClient, Network
from mizu.errors import TransportError

from tests.factories import APP_ID, ENDPOINTS, make_token, order_row


@pytest.fixture
def patched_client(monkeypatch, executor):
    def build(args):
        return MizuClient(APP_ID, Network.TESTNET, executor=executor, endpoints=ENDPOINTS)

    monkeypatch.setattr(cli, "build_client", build)
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    return executor


@pytest.mark.asyncio
async def test_user_exists_command(patched_client, capsys):
    patched_client.respond("CheckUserIsExistQueryByTgId", {"telegramUser": [{"tgId": "1"}]})

    code = await cli.main(["user-exists", "1"])

    assert code == 0
    assert "User exists" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_orders_command_logs_in_and_prints_page(patched_client, capsys):
    patched_client.respond("LoginMutation", {"tgLogin": make_token()})
    patched_client.respond(
        "fetchOrderListQuery",
        {"order": [order_row(0)], "orderAggregate": {"aggregate": {"count": 1}}},
    )

    code = await cli.main(["orders", "--init-data", "init", "--limit", "5", "--status", "PENDING"])

    assert code == 0
    variables = patched_client.calls[-1]["variables"]
    assert variables["limit"] == 5
    assert variables["status"] == [0]
    out = capsys.readouterr().out
    assert "order-0" in out
    assert "of 1" in out


@pytest.mark.asyncio
async def test_errors_are_reported_with_exit_code(patched_client, capsys):
    patched_client.respond("CheckUserIsExistQueryByTgId", TransportError("backend down"))

    code = await cli.main(["user-exists", "1"])

    assert code == 1
    assert "TransportError: backend down" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_no_command_prints_help(capsys):
    code = await cli.main([])

    assert code == 0
    assert "usage" in capsys.readouterr().out.lower()


@pytest.mark.asyncio
async def test_console_logs_flag_selects_console_renderer(patched_client, monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: calls.append((args, kwargs)))
    patched_client.respond("CheckUserIsExistQueryByTgId", {"telegramUser": []})

    await cli.main(["--console-logs", "--log-level", "debug", "user-exists", "1"])

    assert calls == [(("debug",), {"json_logs": False})]
