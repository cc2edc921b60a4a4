from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .document import ConfigDocument

logger = logging.getLogger(__name__)


def missing_keys(document: Mapping[str, Any], template: Mapping[str, Any]) -> list[str]:
    """Template keys absent from the document, in template order."""
    return [k for k in template if k not in document]


def reconcile(document: ConfigDocument, template: Mapping[str, Any]) -> list[str]:
    """
    Copy every template key the document lacks into the document.

    Existing keys are never touched. Returns the keys that were added.
    """
    added = missing_keys(document, template)
    for key in added:
        document[key] = template[key]
    if added:
        logger.info("CONFIG RECONCILE: added %d new setting(s): %s", len(added), ", ".join(added))
    return added
