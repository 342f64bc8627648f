"""
Pytest configuration and shared fixtures for translingo tests.
"""
import json
from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from translingo.client.clipboard import Clipboard
from translingo.client.gateway import GatewayClient
from translingo.client.session import ClientSession
from translingo.client.storage import LocalStorage
from translingo.core.config import Settings, get_settings
from translingo.core.translator import AzureTranslator, get_translator
from translingo.main import app

CANNED = {
    "es": "Hola",
    "fr": "Bonjour",
    "de": "Hallo",
    "fil": "Kamusta",
    "ja": "こんにちは",
}

LANGUAGES_BODY = {
    "translation": {
        "es": {"name": "Spanish", "nativeName": "Español", "dir": "ltr"},
        "fr": {"name": "French", "nativeName": "Français", "dir": "ltr"},
    }
}


class FakeAzure:
    """Stands in for the Azure Translator endpoint and records every call."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.error_text = '{"error":{"code":401000,"message":"Access denied"}}'
        self.body = None
        self.raw_text = None
        self.raise_error = None
        self.on_request = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request:
            self.on_request(request)
        if self.raise_error:
            raise self.raise_error
        if self.status_code >= 400:
            return httpx.Response(self.status_code, text=self.error_text)
        if self.raw_text is not None:
            return httpx.Response(200, text=self.raw_text)
        if request.url.path.endswith("/languages"):
            return httpx.Response(200, json=self.body or LANGUAGES_BODY)
        if self.body is not None:
            return httpx.Response(200, json=self.body)

        text = json.loads(request.content)[0]["Text"]
        translations = [
            {"text": CANNED.get(code, f"[{code}] {text}"), "to": code}
            for code in request.url.params.get_list("to")
        ]
        return httpx.Response(200, json=[{"translations": translations}])

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings():
    return Settings(
        subscription_key="test-key",
        region="westus",
        endpoint="https://azure.test",
    )


@pytest.fixture
def fake_azure():
    return FakeAzure()


@pytest.fixture
def gateway_app(settings, fake_azure):
    """The FastAPI app wired to the fake Azure endpoint."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_translator] = lambda: AzureTranslator(
        settings, transport=httpx.MockTransport(fake_azure.handler)
    )
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(gateway_app):
    with TestClient(gateway_app) as client:
        yield client


@pytest.fixture
def gateway(gateway_app):
    return GatewayClient(
        "http://testserver", transport=httpx.ASGITransport(app=gateway_app)
    )


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(str(tmp_path / "storage.db"))


@pytest.fixture
def clipboard():
    return Clipboard(primary=MagicMock(), fallback=MagicMock())


@pytest.fixture
def session(gateway, storage, clipboard):
    session = ClientSession(gateway, storage, clipboard)
    session.open()
    yield session
    session.close()
