from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIGURATIONS = "DefaultConfigurations"
CLIENT_ASSETS = "Client"


def project_root() -> Path:
    # configuration/paths.py -> configuration -> project root
    return Path(__file__).resolve().parents[1]


def resources_dir() -> Path:
    return project_root() / "resources"


def streaming_assets_dir() -> Path:
    return resources_dir() / "StreamingAssets"


def template_name_for(target_path: str | Path) -> str:
    """
    Base name of the target up to its first dot, so "cfg/StartupConfiguration.json"
    and "StartupConfiguration.backup.json" both map to "StartupConfiguration".
    """
    return Path(target_path).name.split(".")[0]


def template_path_for(target_path: str | Path, resources_root: Path | None = None) -> Path:
    root = resources_dir() if resources_root is None else resources_root
    return root / DEFAULT_CONFIGURATIONS / f"{template_name_for(target_path)}.json"


def client_asset_path(assets_root: Path, target_path: str | Path) -> Path:
    return assets_root / CLIENT_ASSETS / Path(target_path).name
