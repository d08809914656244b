"""
Shared pytest fixtures for mococp tests.
"""

import json
from typing import Any, Callable

import httpx
import pytest

from mococp import configuration
from mococp.repository.configuration import CONFIGURATION_REPO
from mococp.terminal import connect


@pytest.fixture(autouse=True)
def isolate_configuration(tmp_path, monkeypatch):
    """Keep tests away from the real config file and from the network."""
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(connect, "TRANSPORT", None)
    CONFIGURATION_REPO.reset()
    yield
    CONFIGURATION_REPO.reset()


@pytest.fixture
def config() -> configuration.Configuration:
    config = configuration.get_default_configuration()
    config["moco_company"] = "acme"
    config["moco_api_key"] = "personal-key"
    config["moco_bot_api_key"] = "bot-key"
    config["moco_user_id"] = 42
    config["jira_tempo_api_key"] = "tempo-token"
    return config


@pytest.fixture
def logged_in(config) -> configuration.Configuration:
    CONFIGURATION_REPO.update_config(
        moco_company=config["moco_company"],
        moco_api_key=config["moco_api_key"],
        moco_bot_api_key=config["moco_bot_api_key"],
        moco_user_id=config["moco_user_id"],
    )
    return config


class FakeMoco:
    """Routes httpx requests to canned JSON answers and records them."""

    def __init__(self) -> None:
        self.routes: dict[
            tuple[str, str], Callable[[httpx.Request], httpx.Response]
        ] = {}
        self.requests: list[httpx.Request] = []

    def on(
        self, method: str, path: str, payload: Any = None, status: int = 200
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if payload is None:
                return httpx.Response(status)
            return httpx.Response(status, json=payload)

        self.routes[(method, path)] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        return route(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def find(self, method: str, path: str) -> list[httpx.Request]:
        return [
            request
            for request in self.requests
            if request.method == method and request.url.path == path
        ]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content)


@pytest.fixture
def fake_moco(monkeypatch) -> FakeMoco:
    fake = FakeMoco()
    monkeypatch.setattr(connect, "TRANSPORT", fake.transport())
    return fake
