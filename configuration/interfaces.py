from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .document import ConfigDocument


class AcquisitionStrategy(Protocol):
    """
    Where a configuration document comes from, and where it goes back to.
    """

    def source_for(self, config_file_path: str | Path) -> str:
        """Location the document is actually read from (file path or URL)."""
        ...

    def acquire(
        self,
        config_file_path: str | Path,
        *,
        create_if_missing: bool = False,
        update_if_outdated: bool = False,
    ) -> ConfigDocument:
        """Load and return the document, blocking until done."""
        ...

    async def acquire_async(
        self,
        config_file_path: str | Path,
        *,
        create_if_missing: bool = False,
        update_if_outdated: bool = False,
    ) -> ConfigDocument:
        """Awaitable form of acquire(); completes once the document is fully populated."""
        ...

    def persist(self, path: str | Path, document: ConfigDocument, *, single_line: bool = False) -> None:
        """Write the document back to path."""
        ...
