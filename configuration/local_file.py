from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from json_store import atomic_write_json, read_json

from .document import ConfigDocument
from .errors import (
    ConfigIOError,
    ConfigNotFoundError,
    ConfigParseError,
    MissingTemplateError,
    not_found_message,
)
from .interfaces import AcquisitionStrategy
from .paths import client_asset_path, streaming_assets_dir, template_path_for
from .reconcile import reconcile

logger = logging.getLogger(__name__)


def read_document(path: Path) -> ConfigDocument:
    """
    Strict read: missing files raise FileNotFoundError, anything unparseable
    raises ConfigParseError, other I/O failures raise ConfigIOError.
    """
    try:
        raw = read_json(path)
    except FileNotFoundError:
        raise
    except json.JSONDecodeError as exc:
        raise ConfigParseError(f"{path}: malformed JSON ({exc})") from exc
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"{path}: not valid UTF-8 ({exc})") from exc
    except OSError as exc:
        raise ConfigIOError(f"{path}: failed to read configuration: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigParseError(f"{path}: expected a JSON object, got {type(raw).__name__}")
    return ConfigDocument(raw)


def write_document(path: Path, document: ConfigDocument, *, single_line: bool = False) -> None:
    try:
        atomic_write_json(path, document.to_disk_doc(), single_line=single_line)
    except OSError as exc:
        raise ConfigIOError(f"{path}: failed to write configuration: {exc}") from exc
    logger.debug("CONFIG SAVE: wrote %s (single_line=%s)", path, single_line)


class LocalFileStrategy(AcquisitionStrategy):
    """
    Desktop/editor acquisition: the configuration is a plain file on disk.

    - Missing file: fail with remediation steps, or create it from the bundled template.
    - Existing file: optionally reconciled against the template and written back.
    """

    def __init__(self, resources_root: Path | None = None):
        self._resources_root = resources_root

    def source_for(self, config_file_path: str | Path) -> str:
        return str(config_file_path)

    def load_template(self, config_file_path: str | Path) -> ConfigDocument:
        template_path = template_path_for(config_file_path, self._resources_root)
        try:
            return read_document(template_path)
        except FileNotFoundError as exc:
            raise MissingTemplateError(
                f"default configuration template {template_path} is missing; it must ship with the application"
            ) from exc

    def acquire(
        self,
        config_file_path: str | Path,
        *,
        create_if_missing: bool = False,
        update_if_outdated: bool = False,
    ) -> ConfigDocument:
        path = Path(config_file_path)
        if not path.exists():
            if not create_if_missing:
                raise ConfigNotFoundError(not_found_message(str(config_file_path)))
            document = self.load_template(path)
            self.persist(path, document)
            logger.info("CONFIG LOAD: created %s from default template", path)
            return document

        try:
            document = read_document(path)
        except FileNotFoundError as exc:
            # removed between the existence check and the read
            raise ConfigIOError(f"{path}: disappeared while loading: {exc}") from exc
        logger.info("CONFIG LOAD: loaded %s (%d settings)", path, len(document))

        if not update_if_outdated:
            return document

        # Settings may be added between versions; fold new defaults into the user's file.
        reconcile(document, self.load_template(path))
        self.persist(path, document)
        return document

    async def acquire_async(
        self,
        config_file_path: str | Path,
        *,
        create_if_missing: bool = False,
        update_if_outdated: bool = False,
    ) -> ConfigDocument:
        return await asyncio.to_thread(
            self.acquire,
            config_file_path,
            create_if_missing=create_if_missing,
            update_if_outdated=update_if_outdated,
        )

    def persist(self, path: str | Path, document: ConfigDocument, *, single_line: bool = False) -> None:
        write_document(Path(path), document, single_line=single_line)


class BundledFileStrategy(LocalFileStrategy):
    """
    Packaged-build acquisition from a local assets folder
    (``<streaming assets>/Client/<name>``). The packaged file is used as-is:
    no creation, no reconciliation.
    """

    def __init__(self, assets_root: Path | None = None, resources_root: Path | None = None):
        super().__init__(resources_root)
        self._assets_root = assets_root

    def asset_path(self, config_file_path: str | Path) -> Path:
        root = streaming_assets_dir() if self._assets_root is None else self._assets_root
        return client_asset_path(root, config_file_path)

    def source_for(self, config_file_path: str | Path) -> str:
        return str(self.asset_path(config_file_path))

    def acquire(
        self,
        config_file_path: str | Path,
        *,
        create_if_missing: bool = False,
        update_if_outdated: bool = False,
    ) -> ConfigDocument:
        path = self.asset_path(config_file_path)
        logger.info("CONFIG LOAD: loading packaged configuration from %s", path)
        try:
            return read_document(path)
        except FileNotFoundError as exc:
            raise ConfigNotFoundError(
                f"{path} not found; the packaged build must include {Path(config_file_path).name} "
                "under its Client assets folder"
            ) from exc
