from __future__ import annotations
from pathlib import Path
from typing import Union

Pathish = Union[str, Path]

def _as_path(p: Pathish) -> Path:
    return p if isinstance(p, Path) else Path(p)

def ensure_dir(p: Pathish) -> Path:
    path = _as_path(p)
    target = (path.parent if path.suffix else path)
    target.mkdir(parents=True, exist_ok=True)
    return target

def write_bytes(path: Pathish, data: bytes) -> None:
    p = _as_path(path)
    ensure_dir(p)
    tmp = p.with_suffix(p.suffix + ".tmp")
    tmp.write_bytes(data)
    tmp.replace(p)
