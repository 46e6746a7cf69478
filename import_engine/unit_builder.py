"""
import_engine.unit_builder - RawPins → Unit plus position index.

Two passes:
  1. normalise every pin (direction, primary name) and sort by name,
  2. mint a uuid per sorted pin and fold (position, uuid) pairs into the
     position → pin-uuid index the part builder joins on.

Pass 1 finishes before any uuid exists, so an unknown pin type aborts
with nothing half-built.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from import_engine.errors import UnknownPinTypeError
from import_engine.pin_types import (
    DEFAULT_SWAP_GROUP, NAME_SEPARATOR, TYPE_TO_DIRECTION,
)
from pool.records import NormalizedPin, RawPin, Unit
from pool.uuids import UuidFactory, new_uuid


@dataclass(frozen=True)
class _PinDraft:
    position: str
    direction: str
    primary_name: str
    names: tuple[str, ...]


def pin_direction(pin_type: str, position: str = "") -> str:
    try:
        return TYPE_TO_DIRECTION[pin_type]
    except KeyError:
        raise UnknownPinTypeError(pin_type, position) from None


def primary_name(raw_name: str) -> str:
    """'PA2-WKUP' → 'PA2'.  Names without a separator are returned as-is."""
    return raw_name.split(NAME_SEPARATOR, 1)[0]


def normalize_pins(pins: Sequence[RawPin]) -> list[_PinDraft]:
    """Pass 1: drafts sorted by primary name (stable, so ties keep table order)."""
    drafts = [
        _PinDraft(
            position=p.position,
            direction=pin_direction(p.pin_type, p.position),
            primary_name=primary_name(p.name),
            names=tuple(p.signals),
        )
        for p in pins
    ]
    return sorted(drafts, key=lambda d: d.primary_name)


def build_unit(
    pins: Sequence[RawPin],
    *,
    name: str,
    manufacturer: str,
    new_uuid: UuidFactory = new_uuid,
) -> tuple[Unit, dict[str, str]]:
    """
    Return (unit, {position: pin uuid}).
    Raises UnknownPinTypeError for a type outside TYPE_TO_DIRECTION.
    """
    drafts = normalize_pins(pins)

    # Pass 2
    identified = [(new_uuid(), d) for d in drafts]
    unit_pins = {
        uuid: NormalizedPin(
            uuid=uuid,
            direction=d.direction,
            primary_name=d.primary_name,
            names=d.names,
            swap_group=DEFAULT_SWAP_GROUP,
        )
        for uuid, d in identified
    }
    pin_index = {d.position: uuid for uuid, d in identified}

    unit = Unit(uuid=new_uuid(), manufacturer=manufacturer, name=name, pins=unit_pins)
    return unit, pin_index
