from __future__ import annotations

import json
import math
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from json_store import dumps_json

from .errors import ConfigParseError

_MISSING = object()


def as_string(raw: Any) -> str:
    """
    String form of a stored value. Missing values read as "".
    """
    if raw is _MISSING:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if raw is None:
        return "null"
    if isinstance(raw, float):
        if math.isfinite(raw) and raw.is_integer():
            return str(int(raw))
        return repr(raw)
    if isinstance(raw, int):
        return str(raw)
    return dumps_json(raw, single_line=True)


def as_bool(raw: Any) -> bool:
    if raw is _MISSING or raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    text = as_string(raw)
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return bool(text)


def as_float(raw: Any) -> float:
    if raw is _MISSING or raw is None:
        return 0.0
    if isinstance(raw, bool):
        return 1.0 if raw else 0.0
    if isinstance(raw, (int, float)):
        return float(raw)
    try:
        return float(as_string(raw).strip())
    except ValueError:
        return 0.0


def as_int(raw: Any) -> int:
    value = as_float(raw)
    if not math.isfinite(value):
        return 0
    return int(value)


class ConfigDocument(MutableMapping):
    """
    Schema-free, insertion-ordered key/value document backing a configuration.

    Values are whatever JSON produced (str, bool, int, float, None, or a container);
    typed reads go through the permissive ``get_*`` accessors, which never raise
    for a missing key and never insert one.
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: dict[str, Any] = dict(values or {})

    @classmethod
    def from_json(cls, text: str, *, source: str = "<string>") -> "ConfigDocument":
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigParseError(f"{source}: malformed JSON ({exc})") from exc
        if not isinstance(parsed, dict):
            raise ConfigParseError(f"{source}: expected a JSON object, got {type(parsed).__name__}")
        return cls(parsed)

    def to_json(self, *, single_line: bool = True) -> str:
        return dumps_json(self._values, single_line=single_line)

    def to_disk_doc(self) -> dict[str, Any]:
        return dict(self._values)

    def copy(self) -> "ConfigDocument":
        # serialize-then-reparse: no shared mutable structure survives
        return ConfigDocument.from_json(self.to_json())

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ConfigDocument({self._values!r})"

    def get_string(self, key: str) -> str:
        return as_string(self._values.get(key, _MISSING))

    def get_bool(self, key: str) -> bool:
        return as_bool(self._values.get(key, _MISSING))

    def get_int(self, key: str) -> int:
        return as_int(self._values.get(key, _MISSING))

    def get_float(self, key: str) -> float:
        return as_float(self._values.get(key, _MISSING))

    def __str__(self) -> str:
        return self.to_json()
