"""
pool.writer - Publish unit, entity and part into a pool directory.

All three files are first staged as temporaries next to their targets
and only moved into place once every one of them was written.  A failure
while staging removes the temporaries and leaves the pool untouched; a
failure while moving removes whatever temporaries were not yet moved.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

import config
from pool.records import Entity, Part, Unit

logger = logging.getLogger(__name__)

# record kind → top-level pool directory
POOL_DIRS = {
    "unit": "units",
    "entity": "entities",
    "part": "parts",
}


def record_paths(pool_path: str | Path, name: str,
                 subdir: str = config.POOL_SUBDIR) -> dict[str, Path]:
    """Return {kind: target path} for a part called ``name``."""
    root = Path(pool_path)
    return {kind: root / top / subdir / f"{name}.json" for kind, top in POOL_DIRS.items()}


def dump_record(record: dict) -> str:
    return json.dumps(record, indent=config.JSON_INDENT, ensure_ascii=False)


def write_records(pool_path: str | Path, unit: Unit, entity: Entity, part: Part,
                  subdir: str = config.POOL_SUBDIR) -> list[Path]:
    """Write the three records; returns the final paths (unit, entity, part)."""
    targets = record_paths(pool_path, unit.name, subdir)
    payloads = {
        "unit": dump_record(unit.to_dict()),
        "entity": dump_record(entity.to_dict()),
        "part": dump_record(part.to_dict()),
    }

    staged: dict[str, Path] = {}
    try:
        for kind, text in payloads.items():
            staged[kind] = _stage(targets[kind], text)
    except Exception:
        for tmp in staged.values():
            tmp.unlink(missing_ok=True)
        raise

    published: set[str] = set()
    try:
        for kind, tmp in staged.items():
            os.replace(tmp, targets[kind])
            published.add(kind)
            logger.info("Written %s", targets[kind])
    finally:
        for kind, tmp in staged.items():
            if kind not in published:
                tmp.unlink(missing_ok=True)

    return [targets[kind] for kind in POOL_DIRS]


def _stage(target: Path, text: str) -> Path:
    """Write ``text`` to a temp file in target's directory; return its path."""
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.stem}.", suffix=".tmp",
                                    dir=target.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise
    return tmp
