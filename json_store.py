from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    """
    Read JSON from disk.

    Unlike a best-effort cache read, errors propagate: a missing file raises
    FileNotFoundError and malformed content raises json.JSONDecodeError.
    """
    raw = path.read_text(encoding="utf-8")
    return json.loads(raw)


def dumps_json(payload: Any, *, single_line: bool = False) -> str:
    if single_line:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(payload, ensure_ascii=False, indent=2)


def atomic_write_json(path: Path, payload: Any, *, single_line: bool = False) -> None:
    """
    Atomically write JSON to disk by writing to a temp file then replacing.

    Key order is kept as given. Single-line output carries no newline at all.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        f.write(dumps_json(payload, single_line=single_line))
        if not single_line:
            f.write("\n")
    tmp_path.replace(path)
