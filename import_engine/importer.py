"""
import_engine.importer - Top-level orchestrator.

    package_loader ─┐
                    ├→ alignment → unit_builder → entity_builder → part_builder
    pin_table ──────┘

convert() is pure: it takes decoded inputs and returns the three records
without touching the filesystem.  run_import() wraps it with the reads
and the pool write, which only starts once all three records exist.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional

import config
from import_engine.alignment import check_alignment
from import_engine.entity_builder import build_entity
from import_engine.package_loader import load_package, read_package
from import_engine.part_builder import build_part
from import_engine.pin_table import parse_pin_table, pins_from_entries, read_pin_table
from import_engine.report import ImportReport
from import_engine.unit_builder import build_unit
from pool.records import Entity, PackageRecord, Part, RawPin, Unit
from pool.uuids import UuidFactory, new_uuid
from pool.writer import write_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportResult:
    unit: Unit
    entity: Entity
    part: Part
    report: ImportReport = field(compare=False)

    def records(self) -> dict[str, dict]:
        return {
            "unit": self.unit.to_dict(),
            "entity": self.entity.to_dict(),
            "part": self.part.to_dict(),
        }


def synthesize(
    package: PackageRecord,
    pins: Sequence[RawPin],
    *,
    name: str,
    datasheet: str = "",
    description: str = "",
    manufacturer: str = config.MANUFACTURER,
    prefix: str = config.PREFIX,
    tags: Iterable[str] = config.TAGS,
    new_uuid: UuidFactory = new_uuid,
) -> ImportResult:
    """Validate alignment, then build unit → entity → part in that order."""
    tags = tuple(tags)
    alignment = check_alignment(package.pad_index, pins)

    unit, pin_index = build_unit(pins, name=name, manufacturer=manufacturer,
                                 new_uuid=new_uuid)
    entity = build_entity(unit, name=name, manufacturer=manufacturer,
                          prefix=prefix, tags=tags, new_uuid=new_uuid)
    part = build_part(entity, package, pin_index, name=name,
                      manufacturer=manufacturer, tags=tags,
                      datasheet=datasheet, description=description,
                      new_uuid=new_uuid)

    report = ImportReport(
        part_name=name,
        pad_count=package.pad_count,
        pin_count=len(pins),
        unit_uuid=unit.uuid,
        entity_uuid=entity.uuid,
        part_uuid=part.uuid,
        alignment=alignment.to_dict(),
    )
    return ImportResult(unit=unit, entity=entity, part=part, report=report)


def convert(
    package_record: Mapping,
    pin_source: str | bytes | Sequence[Mapping],
    *,
    name: str,
    **kwargs,
) -> ImportResult:
    """
    Decode raw inputs and run synthesize().

    ``pin_source`` is either CubeMX XML content or a list of already-
    decoded pin entries ({Type, Name, Position, Signal?}).
    """
    package = load_package(package_record)
    if isinstance(pin_source, (str, bytes)):
        pins = parse_pin_table(pin_source)
    else:
        pins = pins_from_entries(pin_source)
    return synthesize(package, pins, name=name, **kwargs)


def run_import(
    cfg: config.Configuration,
    *,
    dry_run: bool = False,
    new_uuid: UuidFactory = new_uuid,
    subdir: Optional[str] = None,
) -> ImportResult:
    """Read inputs named by ``cfg``, build the records and write them to the pool."""
    package = read_package(cfg.pool_path, cfg.package_path)
    pins = read_pin_table(cfg.xml_path)

    result = synthesize(
        package, pins,
        name=cfg.part_name,
        datasheet=cfg.datasheet_url,
        description=cfg.description,
        new_uuid=new_uuid,
    )

    if dry_run:
        logger.info("Dry run - nothing written for %s", cfg.part_name)
        return result

    paths = write_records(cfg.pool_path, result.unit, result.entity, result.part,
                          subdir=subdir or config.POOL_SUBDIR)
    result.report.written.extend(str(p) for p in paths)
    return result
