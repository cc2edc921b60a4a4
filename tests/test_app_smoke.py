from __future__ import annotations

import asyncio
import dataclasses
from pathlib import Path

import httpx
from fastapi.testclient import TestClient

from configuration.remote_fetch import RemoteFetchStrategy

from conftest import TEMPLATE, write_json


def test_client_assets_are_served(reload_endpoints):
    import app as app_module

    write_json(reload_endpoints / "Client" / "StartupConfiguration.json", {"StartAsClient": True})
    client = TestClient(app_module.create_app())

    r = client.get("/Client/StartupConfiguration.json")
    assert r.status_code == 200
    assert r.json() == {"StartAsClient": True}

    r = client.get("/Client/Missing.json")
    assert r.status_code == 404

    r = client.get("/Client/..%2F..%2Fresources%2FDefaultConfigurations%2FStartupConfiguration.json")
    assert r.status_code == 404


def test_remote_strategy_fetches_from_asset_server(reload_endpoints):
    import app as app_module

    write_json(reload_endpoints / "Client" / "StartupConfiguration.json", TEMPLATE)
    transport = httpx.ASGITransport(app=app_module.create_app())
    strategy = RemoteFetchStrategy("http://testserver", async_transport=transport)

    async def _run():
        return await strategy.acquire_async("StartupConfiguration.json")

    assert dict(asyncio.run(_run())) == TEMPLATE


def test_startup_configuration_endpoint(reload_endpoints, monkeypatch):
    import app as app_module
    import endpoints.assets_endpoints as assets_endpoints

    client = TestClient(app_module.create_app())

    # no file yet and creation not enabled
    r = client.get("/startup-configuration")
    assert r.status_code == 404
    assert "not found" in r.json()["detail"]

    monkeypatch.setattr(
        assets_endpoints,
        "SETTINGS",
        dataclasses.replace(assets_endpoints.SETTINGS, create_if_missing=True),
    )
    r = client.get("/startup-configuration")
    assert r.status_code == 200
    body = r.json()
    assert body["MaxPlayers"] == 4
    assert body["Port"] == 7777
    assert body["ServerIP"] == "127.0.0.1"
    assert body["AllowReconnection"] is True
    assert body["Role"] == "ClientAndServer"


def test_client_asset_with_null_byte_is_not_found(reload_endpoints):
    import app as app_module

    client = TestClient(app_module.create_app())

    r = client.get("/Client/Startup%00Configuration.json")
    assert r.status_code == 404


def test_startup_configuration_reports_undecodable_file_as_json_error(reload_endpoints):
    import app as app_module
    import endpoints.assets_endpoints as assets_endpoints

    Path(assets_endpoints.SETTINGS.config_file_path).write_bytes(b'{"ServerIP": "\xff"}')
    client = TestClient(app_module.create_app())

    r = client.get("/startup-configuration")
    assert r.status_code == 500
    assert "UTF-8" in r.json()["detail"]
