"""
Tests for translingo/cli.py - command line front end.
"""
import json
from unittest.mock import MagicMock, patch

import httpx
import pytest

from translingo import cli
from translingo.client.gateway import GatewayClient
from translingo.client.history import HISTORY_KEY
from translingo.client.storage import LocalStorage


@pytest.fixture
def storage_path(tmp_path):
    return str(tmp_path / "cli.db")


@pytest.fixture
def asgi_gateway(gateway_app):
    """Route the CLI's gateway client to the in-process app."""
    def _factory(base_url=None):
        return GatewayClient(
            "http://testserver", transport=httpx.ASGITransport(app=gateway_app)
        )

    with patch("translingo.cli.GatewayClient", side_effect=_factory):
        yield


class TestTranslateCommand:

    def test_prints_results_and_records_history(self, asgi_gateway, storage_path, capsys):
        code = cli.main(["--storage", storage_path, "translate", "Hello",
                         "--to", "es", "--to", "fr"])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == [
            "Spanish: Hola", "French: Bonjour"]
        stored = json.loads(LocalStorage(storage_path).get_item(HISTORY_KEY))
        assert len(stored) == 1

    def test_no_target_rejected(self, asgi_gateway, storage_path, capsys, fake_azure):
        code = cli.main(["--storage", storage_path, "translate", "Hello"])

        assert code == 1
        assert "Please select at least one target language." in capsys.readouterr().err
        assert fake_azure.requests == []


class TestHistoryCommand:

    def test_empty_list(self, storage_path, capsys):
        assert cli.main(["--storage", storage_path, "history"]) == 0
        assert "Your translation history will appear here." in capsys.readouterr().out

    def test_reuse_and_clear(self, asgi_gateway, storage_path, capsys):
        cli.main(["--storage", storage_path, "translate", "Hello", "--to", "es"])
        entry_id = json.loads(LocalStorage(storage_path).get_item(HISTORY_KEY))[0]["id"]
        capsys.readouterr()

        assert cli.main(["--storage", storage_path, "history", "reuse", entry_id]) == 0
        assert capsys.readouterr().out.splitlines() == ["en: Hello", "Spanish: Hola"]

        assert cli.main(["--storage", storage_path, "history", "clear", "--yes"]) == 0
        assert json.loads(LocalStorage(storage_path).get_item(HISTORY_KEY)) == []

    def test_clear_declined(self, asgi_gateway, storage_path, monkeypatch):
        cli.main(["--storage", storage_path, "translate", "Hello", "--to", "es"])
        monkeypatch.setattr("builtins.input", MagicMock(return_value="n"))

        cli.main(["--storage", storage_path, "history", "clear"])

        assert len(json.loads(LocalStorage(storage_path).get_item(HISTORY_KEY))) == 1

    def test_delete_unknown(self, storage_path):
        assert cli.main(["--storage", storage_path, "history", "delete", "nope"]) == 1


class TestThemeCommand:

    def test_toggle(self, storage_path, capsys):
        cli.main(["--storage", storage_path, "theme"])
        cli.main(["--storage", storage_path, "theme", "--toggle"])

        assert capsys.readouterr().out.splitlines() == ["light", "dark"]
