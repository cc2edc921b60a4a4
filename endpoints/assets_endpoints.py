# endpoints/assets_endpoints.py
from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from configuration import ConfigurationError, ConfigurationManager, ConfigNotFoundError, StartupConfiguration
from configuration.paths import CLIENT_ASSETS
from settings import get_settings

router = APIRouter(tags=["configuration"])
logger = logging.getLogger(__name__)

# Centralized settings
SETTINGS = get_settings()

CLIENT_ASSETS_DIR = SETTINGS.streaming_assets_dir / CLIENT_ASSETS


def _client_asset(name: str) -> Path:
    """
    Resolve name inside the client assets folder; anything that escapes it is rejected.
    """
    base = CLIENT_ASSETS_DIR.resolve()
    try:
        candidate = (base / name).resolve()
    except ValueError:
        raise HTTPException(status_code=404, detail="not found") from None
    if base not in candidate.parents:
        raise HTTPException(status_code=404, detail="not found")
    return candidate


@router.get("/Client/{name:path}")
async def client_asset(name: str):
    path = _client_asset(name)
    if not path.is_file():
        logger.info("ASSETS: %s requested but not packaged", name)
        raise HTTPException(status_code=404, detail="not found")
    return FileResponse(path, media_type="application/json")


@router.get("/startup-configuration", response_model=StartupConfiguration, response_model_by_alias=True)
async def startup_configuration():
    manager = ConfigurationManager.from_settings(SETTINGS, keep_uninitialized=True)
    try:
        await manager.load_async(
            create_if_missing=SETTINGS.create_if_missing,
            update_if_outdated=SETTINGS.update_if_outdated,
        )
    except ConfigNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ConfigurationError as e:
        logger.warning("STARTUP CONFIG: failed to load %s: %r", SETTINGS.config_file_path, e)
        raise HTTPException(status_code=500, detail=str(e)) from e
    return StartupConfiguration.from_manager(manager)
