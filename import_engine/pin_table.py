"""
import_engine.pin_table - Read a CubeMX MCU description into RawPins.

Responsibilities:
  • XML parsing (ElementTree honours the BOM and declared encoding)
  • Namespace-agnostic lookup of <Mcu>/<Pin>/<Signal>
  • Required-attribute checks (Type, Name, Position)

Pin types are NOT checked here; an unknown type is the unit builder's
concern.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Mapping, Sequence
from pathlib import Path

from import_engine.errors import FormatError
from pool.records import RawPin

logger = logging.getLogger(__name__)

REQUIRED_ATTRS = ("Type", "Name", "Position")


def parse_pin_table(raw: str | bytes) -> list[RawPin]:
    """Parse CubeMX XML content and return its pins in document order."""
    if isinstance(raw, str) and raw.startswith("\ufeff"):
        raw = raw[1:]
    if not raw.strip():
        raise FormatError("Pin table is empty")

    try:
        root = ET.fromstring(raw)
    except ET.ParseError as exc:
        raise FormatError(f"Pin table is not valid XML: {exc}") from exc

    if _local(root.tag) != "Mcu":
        raise FormatError(f"Expected <Mcu> root element, got <{_local(root.tag)}>",
                          root=_local(root.tag))

    entries = []
    for el in root:
        if _local(el.tag) != "Pin":
            continue
        entry = dict(el.attrib)
        entry["Signal"] = [dict(s.attrib) for s in el if _local(s.tag) == "Signal"]
        entries.append(entry)

    return pins_from_entries(entries)


def pins_from_entries(entries: Sequence[Mapping]) -> list[RawPin]:
    """
    Build RawPins from already-decoded entries of the form
    {Type, Name, Position, Signal?: [{Name}]}.
    """
    if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
        raise FormatError("Pin table must be XML text or a list of pin entries")

    pins: list[RawPin] = []
    for idx, entry in enumerate(entries, start=1):
        if not isinstance(entry, Mapping):
            raise FormatError(f"Pin #{idx} is not an object", pin=idx)
        missing = [a for a in REQUIRED_ATTRS if not entry.get(a)]
        if missing:
            raise FormatError(
                f"Pin #{idx} lacks required attribute(s): {', '.join(missing)}",
                pin=idx, missing=missing,
            )
        pins.append(RawPin(
            position=str(entry["Position"]),
            name=str(entry["Name"]),
            pin_type=str(entry["Type"]),
            signals=_signal_names(entry.get("Signal"), idx),
        ))

    if not pins:
        raise FormatError("Pin table contains no pins")
    return pins


def read_pin_table(path: str | Path) -> list[RawPin]:
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise FormatError(f"Cannot read pin table {path}: {exc}", path=str(path)) from exc

    pins = parse_pin_table(raw)
    logger.info("Read %d pins from %s", len(pins), path)
    return pins


# ── Private helpers ────────────────────────────────────────────────────

def _signal_names(signals, idx: int) -> tuple[str, ...]:
    if not signals:
        return ()
    if isinstance(signals, (str, bytes)) or not isinstance(signals, Sequence):
        raise FormatError(f"Pin #{idx} Signal must be a list", pin=idx)
    names = []
    for s in signals:
        name = s.get("Name") if isinstance(s, Mapping) else None
        if not name:
            raise FormatError(f"Pin #{idx} has a Signal without a Name", pin=idx)
        names.append(str(name))
    return tuple(names)


def _local(tag: str) -> str:
    """Strip an ElementTree '{namespace}' prefix."""
    return tag.rsplit("}", 1)[-1]

