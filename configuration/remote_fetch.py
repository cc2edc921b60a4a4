from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote

import httpx

from .document import ConfigDocument
from .errors import ConfigIOError, ConfigNotFoundError
from .interfaces import AcquisitionStrategy
from .paths import CLIENT_ASSETS

logger = logging.getLogger(__name__)


class RemoteFetchStrategy(AcquisitionStrategy):
    """
    Acquisition for sandboxed/mobile runtimes that cannot read the packaged
    assets as files: the document is fetched with an HTTP GET from
    ``<base_url>/Client/<name>`` and used as-is (no creation, no reconciliation).

    Fetched configurations are read-only; persist() raises ConfigIOError.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._async_transport = async_transport

    def source_for(self, config_file_path: str | Path) -> str:
        name = quote(Path(config_file_path).name)
        return f"{self._base_url}/{CLIENT_ASSETS}/{name}"

    def _to_document(self, url: str, response: httpx.Response) -> ConfigDocument:
        if response.status_code == 404:
            raise ConfigNotFoundError(f"{url} not found; the packaged assets must include this configuration")
        if response.status_code >= 400:
            raise ConfigIOError(f"{url}: fetch failed ({response.status_code})")
        document = ConfigDocument.from_json(response.text, source=url)
        logger.info("CONFIG LOAD: fetched %s: %s", url, document.to_json())
        return document

    def acquire(
        self,
        config_file_path: str | Path,
        *,
        create_if_missing: bool = False,
        update_if_outdated: bool = False,
    ) -> ConfigDocument:
        url = self.source_for(config_file_path)
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(url)
        except httpx.HTTPError as exc:
            raise ConfigIOError(f"{url}: fetch failed: {exc!r}") from exc
        return self._to_document(url, response)

    async def acquire_async(
        self,
        config_file_path: str | Path,
        *,
        create_if_missing: bool = False,
        update_if_outdated: bool = False,
    ) -> ConfigDocument:
        url = self.source_for(config_file_path)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._async_transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            raise ConfigIOError(f"{url}: fetch failed: {exc!r}") from exc
        return self._to_document(url, response)

    def persist(self, path: str | Path, document: ConfigDocument, *, single_line: bool = False) -> None:
        raise ConfigIOError(f"{path}: fetched configurations are read-only and cannot be saved")
