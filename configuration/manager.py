from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable

from . import keys
from .document import ConfigDocument
from .errors import ConfigurationNotLoadedError
from .interfaces import AcquisitionStrategy
from .local_file import LocalFileStrategy, write_document
from .roles import MultiplayerRole, RoleMaskProvider, fixed_role_mask, role_mask_from_settings
from .strategies import select_strategy

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Owns one configuration document and the path it was loaded from.

    Acquisition is strict (missing file, malformed JSON and I/O failures raise);
    reads are permissive (missing keys come back as "", False, 0 or 0.0).
    Not thread-safe: one owner at a time.
    """

    def __init__(
        self,
        config_file_path: str | Path = keys.DEV_CONFIG_FILE,
        *,
        keep_uninitialized: bool = False,
        create_if_missing: bool = False,
        update_if_outdated: bool = False,
        strategy: AcquisitionStrategy | None = None,
        role_mask_provider: RoleMaskProvider | None = None,
    ):
        self._strategy: AcquisitionStrategy = strategy or LocalFileStrategy()
        self._role_mask_provider = role_mask_provider or fixed_role_mask(MultiplayerRole.CLIENT_AND_SERVER)
        self._config_file_path = str(config_file_path)
        self._config: ConfigDocument | None = None
        if keep_uninitialized:
            return
        self.load(create_if_missing=create_if_missing, update_if_outdated=update_if_outdated)

    @classmethod
    def from_settings(cls, settings, *, keep_uninitialized: bool = False) -> "ConfigurationManager":
        return cls(
            settings.config_file_path,
            keep_uninitialized=keep_uninitialized,
            create_if_missing=settings.create_if_missing,
            update_if_outdated=settings.update_if_outdated,
            strategy=select_strategy(settings),
            role_mask_provider=role_mask_from_settings(settings),
        )

    @classmethod
    async def open_async(
        cls,
        config_file_path: str | Path = keys.DEV_CONFIG_FILE,
        *,
        create_if_missing: bool = False,
        update_if_outdated: bool = False,
        strategy: AcquisitionStrategy | None = None,
        role_mask_provider: RoleMaskProvider | None = None,
        on_finished: Callable[["ConfigurationManager"], None] | None = None,
    ) -> "ConfigurationManager":
        """
        Create a manager and acquire its document without blocking the event loop.

        on_finished runs exactly once, after the document is populated and
        before this coroutine returns.
        """
        manager = cls(
            config_file_path,
            keep_uninitialized=True,
            strategy=strategy,
            role_mask_provider=role_mask_provider,
        )
        await manager.load_async(
            create_if_missing=create_if_missing,
            update_if_outdated=update_if_outdated,
            on_finished=on_finished,
        )
        return manager

    # ------------------------------------------------------------------
    # Acquisition
    # ------------------------------------------------------------------

    @property
    def config_file_path(self) -> str:
        return self._config_file_path

    @property
    def is_loaded(self) -> bool:
        return self._config is not None

    def load(
        self,
        config_file_path: str | Path | None = None,
        *,
        create_if_missing: bool = False,
        update_if_outdated: bool = False,
    ) -> None:
        path = self._config_file_path if config_file_path is None else str(config_file_path)
        document = self._strategy.acquire(
            path,
            create_if_missing=create_if_missing,
            update_if_outdated=update_if_outdated,
        )
        self._bind(path, document)

    async def load_async(
        self,
        config_file_path: str | Path | None = None,
        *,
        create_if_missing: bool = False,
        update_if_outdated: bool = False,
        on_finished: Callable[["ConfigurationManager"], None] | None = None,
    ) -> None:
        path = self._config_file_path if config_file_path is None else str(config_file_path)
        document = await self._strategy.acquire_async(
            path,
            create_if_missing=create_if_missing,
            update_if_outdated=update_if_outdated,
        )
        self._bind(path, document)
        if on_finished is not None:
            on_finished(self)

    def _bind(self, path: str, document: ConfigDocument) -> None:
        self._config_file_path = self._strategy.source_for(path)
        self._config = document

    @property
    def config(self) -> ConfigDocument:
        if self._config is None:
            raise ConfigurationNotLoadedError(
                f"configuration {self._config_file_path} was used before it finished loading"
            )
        return self._config

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def get_multiplayer_role(self) -> MultiplayerRole:
        if self.get_bool(keys.OVERRIDE_MULTIPLAYER_ROLE):
            if self.get_bool(keys.MODE_SERVER):
                return MultiplayerRole.SERVER
            if self.get_bool(keys.MODE_HOST):
                return MultiplayerRole.CLIENT_AND_SERVER
            if self.get_bool(keys.MODE_CLIENT):
                return MultiplayerRole.CLIENT
        return self._role_mask_provider()

    # ------------------------------------------------------------------
    # Access & mutation
    # ------------------------------------------------------------------

    def remove(self, key: str) -> None:
        self.config.pop(key, None)

    def contains(self, key: str) -> bool:
        return key in self.config

    def set(self, key: str, value: Any) -> None:
        self.config[key] = str(value)

    def get_string(self, key: str) -> str:
        return self.config.get_string(key)

    def get_bool(self, key: str) -> bool:
        return self.config.get_bool(key)

    def get_int(self, key: str) -> int:
        return self.config.get_int(key)

    def get_float(self, key: str) -> float:
        return self.config.get_float(key)

    def save_as_json(self, single_line: bool, path: str | Path | None = None) -> None:
        """
        Write the configuration to the path it was loaded from, or to path if given.
        """
        if path is None:
            self._strategy.persist(self._config_file_path, self.config, single_line=single_line)
            return
        write_document(Path(path), self.config, single_line=single_line)

    def overwrite(self, new_configuration: ConfigDocument | Mapping[str, Any]) -> None:
        if isinstance(new_configuration, ConfigDocument):
            self._config = new_configuration.copy()
        else:
            self._config = ConfigDocument(new_configuration).copy()

    def to_string(self) -> str:
        return self.config.to_json(single_line=True)

    def __str__(self) -> str:
        return self.to_string()
