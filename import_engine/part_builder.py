"""
import_engine.part_builder - Join unit pins to package pads and build the part.

    pin_index   position → pin uuid      (from the unit builder)
    pad_index   pad name → pad uuid      (from the package)
    pad_map     pad uuid → {gate, pin}

Positions and pad names are the same keys once alignment has passed, so
a miss here is a bug, not bad input: it raises AssertionError.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pool.records import Entity, PackageRecord, PadMapEntry, Part
from pool.uuids import UuidFactory, new_uuid


def build_pad_map(gate_uuid: str, pin_index: Mapping[str, str],
                  pad_index: Mapping[str, str]) -> dict[str, PadMapEntry]:
    pad_map: dict[str, PadMapEntry] = {}
    for position, pin_uuid in pin_index.items():
        pad_uuid = pad_index.get(position)
        assert pad_uuid is not None, f"position {position!r} has no pad"
        assert pad_uuid not in pad_map, f"pad {pad_uuid} mapped twice"
        pad_map[pad_uuid] = PadMapEntry(gate=gate_uuid, pin=pin_uuid)

    assert len(pad_map) == len(pad_index), (
        f"pad map covers {len(pad_map)} of {len(pad_index)} pads"
    )
    return pad_map


def build_part(
    entity: Entity,
    package: PackageRecord,
    pin_index: Mapping[str, str],
    *,
    name: str,
    manufacturer: str,
    tags: Iterable[str],
    datasheet: str = "",
    description: str = "",
    new_uuid: UuidFactory = new_uuid,
) -> Part:
    assert len(entity.gates) == 1, "part builder expects a single-gate entity"
    (gate_uuid,) = entity.gates

    return Part(
        uuid=new_uuid(),
        entity=entity.uuid,
        package=package.uuid,
        manufacturer=manufacturer,
        mpn=name,
        tags=tuple(tags),
        pad_map=build_pad_map(gate_uuid, pin_index, package.pad_index),
        datasheet=datasheet,
        description=description,
        value="",
        inherit_model=True,
        inherit_tags=False,
    )
