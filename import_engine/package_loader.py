"""
import_engine.package_loader - Read an existing pool package and index its pads.

The package is never modified; we only need its uuid (for the part's
``package`` reference) and a pad-name → pad-uuid lookup used to align
the vendor pin table with the footprint.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from import_engine.errors import SchemaError
from pool.records import PackageRecord

logger = logging.getLogger(__name__)


def build_pad_index(pads: Mapping) -> dict[str, str]:
    """
    Return {pad name: pad uuid}.  Raises SchemaError when a pad has no
    name or two pads share one.
    """
    index: dict[str, str] = {}
    for pad_uuid, pad in pads.items():
        name = pad.get("name") if isinstance(pad, Mapping) else None
        if name is None or str(name) == "":
            raise SchemaError(f"Pad {pad_uuid} has no name", pad=pad_uuid)
        name = str(name)
        if name in index:
            raise SchemaError(
                f"Duplicate pad name {name!r} ({index[name]}, {pad_uuid})",
                code=SchemaError.DUPLICATE_PAD_NAME,
                name=name, pads=[index[name], pad_uuid],
            )
        index[name] = pad_uuid
    return index


def load_package(record: Mapping) -> PackageRecord:
    """Validate a decoded package JSON object and build its pad index."""
    if not isinstance(record, Mapping):
        raise SchemaError("Package record is not a JSON object")

    pads = record.get("pads")
    if not isinstance(pads, Mapping):
        raise SchemaError("Package record has no 'pads' object")

    package_uuid = record.get("uuid")
    if not package_uuid:
        raise SchemaError("Package record has no 'uuid'")

    return PackageRecord(uuid=str(package_uuid), pad_index=build_pad_index(pads))


def read_package(pool_path: str | Path, package_path: str | Path) -> PackageRecord:
    """
    Load a package JSON file.  ``package_path`` is resolved against the
    pool root unless it is already absolute.
    """
    path = Path(pool_path) / Path(package_path)
    try:
        with open(path, encoding="utf-8") as fh:
            record = json.load(fh)
    except OSError as exc:
        raise SchemaError(f"Cannot read package {path}: {exc}", path=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Package {path} is not valid JSON: {exc}", path=str(path)) from exc

    package = load_package(record)
    logger.info("Loaded package %s (%d pads) from %s",
                package.uuid, package.pad_count, path)
    return package
