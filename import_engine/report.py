"""
import_engine.report - Structured summary of one import run.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ImportReport:
    part_name: str = ""
    pad_count: int = 0
    pin_count: int = 0
    unit_uuid: str = ""
    entity_uuid: str = ""
    part_uuid: str = ""
    alignment: dict = field(default_factory=dict)
    written: list[str] = field(default_factory=list)    # file paths, empty on dry run

    def to_dict(self) -> dict:
        return {
            "part_name": self.part_name,
            "pad_count": self.pad_count,
            "pin_count": self.pin_count,
            "unit_uuid": self.unit_uuid,
            "entity_uuid": self.entity_uuid,
            "part_uuid": self.part_uuid,
            "alignment": self.alignment,
            "written": self.written,
        }
