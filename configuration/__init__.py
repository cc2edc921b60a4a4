from __future__ import annotations

from .document import ConfigDocument
from .errors import (
    ConfigIOError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigurationError,
    ConfigurationNotLoadedError,
    MissingTemplateError,
)
from .interfaces import AcquisitionStrategy
from .local_file import BundledFileStrategy, LocalFileStrategy
from .manager import ConfigurationManager
from .paths import template_path_for
from .reconcile import reconcile
from .remote_fetch import RemoteFetchStrategy
from .roles import MultiplayerRole
from .startup import StartupConfiguration
from .strategies import select_strategy

__all__ = [
    "ConfigDocument",
    "ConfigurationManager",
    "StartupConfiguration",
    "MultiplayerRole",
    "AcquisitionStrategy",
    "LocalFileStrategy",
    "BundledFileStrategy",
    "RemoteFetchStrategy",
    "select_strategy",
    "reconcile",
    "template_path_for",
    "ConfigurationError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigIOError",
    "MissingTemplateError",
    "ConfigurationNotLoadedError",
]
