from __future__ import annotations

import importlib
import json
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import configuration...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


TEMPLATE = {
    "OverrideMultiplayerRole": False,
    "StartAsHost": False,
    "StartAsServer": False,
    "StartAsClient": False,
    "MaxPlayers": 4,
    "Port": 7777,
    "EnableBots": False,
    "ServerIP": "127.0.0.1",
    "AutoConnect": False,
    "AllowReconnection": True,
}


def write_json(path: Path, payload) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def resources_root(tmp_path: Path) -> Path:
    """
    A resources folder holding DefaultConfigurations/StartupConfiguration.json.
    """
    root = tmp_path / "resources"
    write_json(root / "DefaultConfigurations" / "StartupConfiguration.json", TEMPLATE)
    return root


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    p = tmp_path / "work"
    p.mkdir()
    return p


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, resources_root: Path) -> Path:
    """
    Redirect default resource lookups to a temp project directory so tests never touch ./resources.
    """
    import configuration.paths as paths

    def _project_root() -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "project_root", _project_root)
    return tmp_path


@pytest.fixture
def reload_endpoints(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, resources_root: Path, workdir: Path) -> Path:
    """
    Endpoints read settings at import time; point them at temp folders and reload.
    Returns the streaming assets folder.
    """
    assets = tmp_path / "StreamingAssets"
    (assets / "Client").mkdir(parents=True)
    monkeypatch.setenv("CONFIG_RESOURCES_DIR", str(resources_root))
    monkeypatch.setenv("CONFIG_STREAMING_ASSETS_DIR", str(assets))
    monkeypatch.setenv("CONFIG_FILE_PATH", str(workdir / "StartupConfiguration.json"))
    monkeypatch.setenv("CONFIG_ACQUISITION_MODE", "local")
    monkeypatch.delenv("CONFIG_CREATE_IF_MISSING", raising=False)
    monkeypatch.delenv("CONFIG_UPDATE_IF_OUTDATED", raising=False)
    monkeypatch.delenv("CONFIG_DEFAULT_ROLE", raising=False)

    import endpoints.assets_endpoints as assets_endpoints

    importlib.reload(assets_endpoints)
    return assets
