"""
pool.records - In-memory pool records.

Inputs
------
RawPin         - one row of the vendor pin table, untouched.
PackageRecord  - the existing package: its uuid plus pad name → pad uuid.

Outputs
-------
Unit / Entity / Part - the three records written to the pool.  Each is
built once and never mutated; to_dict() yields the JSON layout Horizon
expects, keys in the order Horizon itself writes them.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawPin:
    position: str                   # package position label, e.g. "PA1" or "B7"
    name: str
    pin_type: str
    signals: tuple[str, ...] = ()


@dataclass(frozen=True)
class PackageRecord:
    uuid: str
    pad_index: dict[str, str]       # pad name → pad uuid

    @property
    def pad_count(self) -> int:
        return len(self.pad_index)


@dataclass(frozen=True)
class NormalizedPin:
    uuid: str
    direction: str
    primary_name: str
    names: tuple[str, ...] = ()
    swap_group: int = 0

    def to_dict(self) -> dict:
        return {
            "direction": self.direction,
            "names": list(self.names),
            "primary_name": self.primary_name,
            "swap_group": self.swap_group,
        }


@dataclass(frozen=True)
class Unit:
    uuid: str
    manufacturer: str
    name: str
    pins: dict[str, NormalizedPin] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "manufacturer": self.manufacturer,
            "name": self.name,
            "pins": {uuid: pin.to_dict() for uuid, pin in self.pins.items()},
            "type": "unit",
            "uuid": self.uuid,
        }


@dataclass(frozen=True)
class Gate:
    uuid: str
    unit: str                       # unit uuid (reference, not ownership)
    name: str = "Main"
    suffix: str = ""
    swap_group: int = 0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "suffix": self.suffix,
            "swap_group": self.swap_group,
            "unit": self.unit,
        }


@dataclass(frozen=True)
class Entity:
    uuid: str
    manufacturer: str
    name: str
    prefix: str
    tags: tuple[str, ...] = ()
    gates: dict[str, Gate] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "gates": {uuid: gate.to_dict() for uuid, gate in self.gates.items()},
            "manufacturer": self.manufacturer,
            "name": self.name,
            "prefix": self.prefix,
            "tags": list(self.tags),
            "type": "entity",
            "uuid": self.uuid,
        }


@dataclass(frozen=True)
class PadMapEntry:
    gate: str
    pin: str

    def to_dict(self) -> dict:
        return {"gate": self.gate, "pin": self.pin}


@dataclass(frozen=True)
class Part:
    """
    A purchasable variant.  Text attributes that Horizon lets a part
    inherit from its base are serialised as [override, value] pairs;
    this tool never overrides, so the flag is always False.
    """
    uuid: str
    entity: str
    package: str
    manufacturer: str
    mpn: str
    tags: tuple[str, ...] = ()
    pad_map: dict[str, PadMapEntry] = field(default_factory=dict)
    datasheet: str = ""
    description: str = ""
    value: str = ""
    inherit_model: bool = True
    inherit_tags: bool = False

    def to_dict(self) -> dict:
        return {
            "MPN": [False, self.mpn],
            "datasheet": [False, self.datasheet],
            "description": [False, self.description],
            "entity": self.entity,
            "inherit_model": self.inherit_model,
            "inherit_tags": self.inherit_tags,
            "manufacturer": [False, self.manufacturer],
            "orderable_MPNs": {},
            "package": self.package,
            "pad_map": {pad: entry.to_dict() for pad, entry in self.pad_map.items()},
            "parametric": {},
            "tags": list(self.tags),
            "type": "part",
            "uuid": self.uuid,
            "value": [False, self.value],
        }
