from __future__ import annotations

from pathlib import Path

import pytest

from configuration.local_file import BundledFileStrategy, LocalFileStrategy
from configuration.manager import ConfigurationManager
from configuration.remote_fetch import RemoteFetchStrategy
from configuration.roles import MultiplayerRole
from configuration.strategies import select_strategy
from settings import get_settings

from conftest import TEMPLATE


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "CONFIG_FILE_PATH",
        "CONFIG_CREATE_IF_MISSING",
        "CONFIG_UPDATE_IF_OUTDATED",
        "CONFIG_ACQUISITION_MODE",
        "CONFIG_RESOURCES_DIR",
        "CONFIG_STREAMING_ASSETS_DIR",
        "CONFIG_ASSETS_BASE_URL",
        "CONFIG_FETCH_TIMEOUT",
        "CONFIG_DEFAULT_ROLE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    s = get_settings()
    assert s.config_file_path == "StartupConfiguration.json"
    assert s.acquisition_mode == "local"
    assert s.create_if_missing is False
    assert s.update_if_outdated is False
    assert s.resources_dir.name == "resources"
    assert s.streaming_assets_dir == s.resources_dir / "StreamingAssets"
    assert s.fetch_timeout == 10.0
    assert isinstance(select_strategy(s), LocalFileStrategy)


def test_env_overrides(clean_env):
    clean_env.setenv("CONFIG_CREATE_IF_MISSING", "yes")
    clean_env.setenv("CONFIG_ACQUISITION_MODE", "Remote")
    clean_env.setenv("CONFIG_ASSETS_BASE_URL", "http://cdn.test/assets/")
    clean_env.setenv("CONFIG_FETCH_TIMEOUT", "2.5")

    s = get_settings()
    assert s.create_if_missing is True
    assert s.acquisition_mode == "remote"
    assert s.assets_base_url == "http://cdn.test/assets"
    assert s.fetch_timeout == 2.5

    strategy = select_strategy(s)
    assert isinstance(strategy, RemoteFetchStrategy)
    assert strategy.source_for("StartupConfiguration.json") == "http://cdn.test/assets/Client/StartupConfiguration.json"


def test_bundled_mode(clean_env):
    clean_env.setenv("CONFIG_ACQUISITION_MODE", "bundled")
    assert isinstance(select_strategy(get_settings()), BundledFileStrategy)


def test_unknown_mode_is_rejected(clean_env):
    clean_env.setenv("CONFIG_ACQUISITION_MODE", "carrier-pigeon")
    with pytest.raises(ValueError):
        get_settings()


def test_manager_from_settings(clean_env, workdir: Path, resources_root: Path):
    clean_env.setenv("CONFIG_FILE_PATH", str(workdir / "StartupConfiguration.json"))
    clean_env.setenv("CONFIG_RESOURCES_DIR", str(resources_root))
    clean_env.setenv("CONFIG_CREATE_IF_MISSING", "true")
    clean_env.setenv("CONFIG_DEFAULT_ROLE", "Server")

    manager = ConfigurationManager.from_settings(get_settings())

    assert manager.get_int("MaxPlayers") == TEMPLATE["MaxPlayers"]
    assert manager.get_multiplayer_role() == MultiplayerRole.SERVER


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ClientAndServer", MultiplayerRole.CLIENT_AND_SERVER),
        ("CLIENT_AND_SERVER", MultiplayerRole.CLIENT_AND_SERVER),
        ("server", MultiplayerRole.SERVER),
        (" Client ", MultiplayerRole.CLIENT),
    ],
)
def test_role_parse(raw, expected):
    assert MultiplayerRole.parse(raw) == expected


def test_role_display_name():
    assert MultiplayerRole.CLIENT_AND_SERVER.display_name == "ClientAndServer"
    with pytest.raises(ValueError):
        MultiplayerRole.parse("spectator")
