from __future__ import annotations

import logging

from .interfaces import AcquisitionStrategy
from .local_file import BundledFileStrategy, LocalFileStrategy
from .remote_fetch import RemoteFetchStrategy

logger = logging.getLogger(__name__)


def select_strategy(settings) -> AcquisitionStrategy:
    """
    Pick the acquisition strategy for this deployment once, at startup.
    """
    mode = settings.acquisition_mode
    if mode == "local":
        strategy: AcquisitionStrategy = LocalFileStrategy(resources_root=settings.resources_dir)
    elif mode == "bundled":
        strategy = BundledFileStrategy(
            assets_root=settings.streaming_assets_dir,
            resources_root=settings.resources_dir,
        )
    elif mode == "remote":
        strategy = RemoteFetchStrategy(settings.assets_base_url, timeout=settings.fetch_timeout)
    else:
        raise ValueError(f"unknown acquisition mode {mode!r}")
    logger.debug("CONFIG STRATEGY: using %s for mode %s", type(strategy).__name__, mode)
    return strategy
