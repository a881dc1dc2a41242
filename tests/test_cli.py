"""CLI commands via click's test runner."""

import json

import httpx
import pytest
from click.testing import CliRunner

from atproto_kit.cli import main as cli_main
from atproto_kit.client import AsyncATProtoKit
from atproto_kit.session import Session
from atproto_kit.transport.http import HttpxTransport


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(cli_main, "CONFIG_FILE", path)
    return path


def _client_returning(response: httpx.Response):
    def factory(authenticated: bool = True):
        transport = HttpxTransport(transport=httpx.MockTransport(lambda request: response))
        session = Session(service_url="https://pds.example.com", access_token="tok")
        return AsyncATProtoKit(session=session, transport=transport)
    return factory


def test_auth_login_status_logout(config_file):
    runner = CliRunner()

    result = runner.invoke(cli_main.main, ["auth", "login", "--token", "tok", "--handle", "alice.test"])
    assert result.exit_code == 0, result.output
    cfg = json.loads(config_file.read_text())
    assert cfg["access_token"] == "tok"
    assert cfg["service_url"] == "https://bsky.social"

    result = runner.invoke(cli_main.main, ["auth", "status"])
    assert "alice.test" in result.output

    runner.invoke(cli_main.main, ["auth", "logout"])
    assert json.loads(config_file.read_text()) == {}


def test_commands_need_login(config_file):
    result = CliRunner().invoke(cli_main.main, ["notifications", "unread"])
    assert result.exit_code == 1
    assert "Not logged in" in result.output


def test_notifications_list_json(config_file, monkeypatch, notification):
    response = httpx.Response(200, json={"notifications": [notification]})
    monkeypatch.setattr(cli_main, "_get_client", _client_returning(response))
    result = CliRunner().invoke(cli_main.main, ["notifications", "list", "--json"])
    assert result.exit_code == 0, result.output
    output = json.loads(result.output)
    assert output["notifications"][0]["reason"] == "like"


def test_failed_call_exits_nonzero(config_file, monkeypatch):
    response = httpx.Response(401, json={"error": "ExpiredToken", "message": "Token has expired"})
    monkeypatch.setattr(cli_main, "_get_client", _client_returning(response))
    result = CliRunner().invoke(cli_main.main, ["lists", "blocks"])
    assert result.exit_code == 1
    assert "Token has expired" in result.output


def test_login_keeps_saved_identity(config_file):
    runner = CliRunner()
    runner.invoke(cli_main.main, ["auth", "login", "--token", "old", "--handle", "alice.test", "--did", "did:plc:alice"])
    result = runner.invoke(cli_main.main, ["auth", "login", "--token", "new"])
    assert result.exit_code == 0, result.output
    cfg = json.loads(config_file.read_text())
    assert cfg["access_token"] == "new"
    assert cfg["handle"] == "alice.test"
    assert cfg["did"] == "did:plc:alice"


def test_record_get_defaults_to_public_host(config_file, monkeypatch):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"uri": "at://x", "cid": "bafy", "value": {"text": "hi"}})

    def factory(authenticated: bool = True):
        return AsyncATProtoKit(transport=HttpxTransport(transport=httpx.MockTransport(handler)))

    monkeypatch.setattr(cli_main, "_get_client", factory)
    result = CliRunner().invoke(cli_main.main, ["record", "get", "alice.test", "app.bsky.feed.post", "3kq"])
    assert result.exit_code == 0, result.output
    assert requests[0].url.host == "bsky.social"
