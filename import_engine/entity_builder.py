"""
import_engine.entity_builder - Wrap a unit in a single-gate entity.
"""

from __future__ import annotations

from collections.abc import Iterable

from import_engine.pin_types import DEFAULT_SWAP_GROUP
from pool.records import Entity, Gate, Unit
from pool.uuids import UuidFactory, new_uuid

GATE_NAME = "Main"


def build_entity(
    unit: Unit,
    *,
    name: str,
    manufacturer: str,
    prefix: str,
    tags: Iterable[str],
    new_uuid: UuidFactory = new_uuid,
) -> Entity:
    gate = Gate(uuid=new_uuid(), unit=unit.uuid, name=GATE_NAME,
                suffix="", swap_group=DEFAULT_SWAP_GROUP)
    return Entity(
        uuid=new_uuid(),
        manufacturer=manufacturer,
        name=name,
        prefix=prefix,
        tags=tuple(tags),
        gates={gate.uuid: gate},
    )
