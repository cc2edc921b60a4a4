from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent

ACQUISITION_MODES = ("local", "bundled", "remote")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


@dataclass(frozen=True)
class Settings:
    # Target document
    config_file_path: str
    create_if_missing: bool
    update_if_outdated: bool

    # Acquisition: "local" (desktop/editor), "bundled" (packaged file), "remote" (fetch)
    acquisition_mode: str

    # Resource locations
    resources_dir: Path
    streaming_assets_dir: Path

    # Remote fetch
    assets_base_url: str
    fetch_timeout: float

    # Role used when the configuration does not override it
    default_role: str


def get_settings() -> Settings:
    config_file_path = os.getenv("CONFIG_FILE_PATH", "StartupConfiguration.json")
    create_if_missing = _env_bool("CONFIG_CREATE_IF_MISSING", False)
    update_if_outdated = _env_bool("CONFIG_UPDATE_IF_OUTDATED", False)

    acquisition_mode = os.getenv("CONFIG_ACQUISITION_MODE", "local").strip().lower()
    if acquisition_mode not in ACQUISITION_MODES:
        raise ValueError(
            f"CONFIG_ACQUISITION_MODE must be one of {', '.join(ACQUISITION_MODES)}, got {acquisition_mode!r}"
        )

    resources_dir = Path(os.getenv("CONFIG_RESOURCES_DIR", str(PROJECT_ROOT / "resources")))
    streaming_assets_dir = Path(os.getenv("CONFIG_STREAMING_ASSETS_DIR", str(resources_dir / "StreamingAssets")))

    assets_base_url = (os.getenv("CONFIG_ASSETS_BASE_URL", "http://127.0.0.1:8000")).rstrip("/")
    fetch_timeout = _env_float("CONFIG_FETCH_TIMEOUT", 10.0)

    default_role = os.getenv("CONFIG_DEFAULT_ROLE", "ClientAndServer")

    return Settings(
        config_file_path=config_file_path,
        create_if_missing=create_if_missing,
        update_if_outdated=update_if_outdated,
        acquisition_mode=acquisition_mode,
        resources_dir=resources_dir,
        streaming_assets_dir=streaming_assets_dir,
        assets_base_url=assets_base_url,
        fetch_timeout=fetch_timeout,
        default_role=default_role,
    )
