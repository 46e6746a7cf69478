"""
import_engine.alignment - Check that package and pin table describe one device.

Runs to completion before reporting so the operator sees every bad
position at once.  Nothing is synthesised unless the report is ok.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional

from import_engine.errors import AlignmentError, AlignmentReason
from pool.records import RawPin


@dataclass(frozen=True)
class AlignmentReport:
    pad_count: int
    pin_count: int
    reason: Optional[AlignmentReason] = None
    positions: tuple[str, ...] = field(default=())    # offending position keys

    @property
    def ok(self) -> bool:
        return self.reason is None

    def message(self) -> str:
        if self.reason is AlignmentReason.CARDINALITY_MISMATCH:
            return (f"Pin and pad count mismatch: package has {self.pad_count} pads, "
                    f"pin table has {self.pin_count} pins")
        if self.reason is AlignmentReason.UNRESOLVED_POSITION:
            return ("Cannot align pad names with pin positions: "
                    + ", ".join(self.positions))
        if self.reason is AlignmentReason.DUPLICATE_POSITION:
            return "Pin table repeats position(s): " + ", ".join(self.positions)
        return "Package and pin table are aligned"

    def raise_for_failure(self) -> None:
        if self.ok:
            return
        raise AlignmentError(
            self.reason, self.message(),
            pad_count=self.pad_count, pin_count=self.pin_count,
            positions=list(self.positions),
        )

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "reason": self.reason.value if self.reason else None,
            "pad_count": self.pad_count,
            "pin_count": self.pin_count,
            "positions": list(self.positions),
        }


def validate_alignment(pad_index: Mapping[str, str],
                       pins: Sequence[RawPin]) -> AlignmentReport:
    """
    Return an AlignmentReport.  Checks, in order: equal counts, every
    position naming a pad, every position unique.
    """
    pad_count, pin_count = len(pad_index), len(pins)

    if pad_count != pin_count:
        return AlignmentReport(pad_count, pin_count,
                               AlignmentReason.CARDINALITY_MISMATCH)

    unresolved = tuple(p.position for p in pins if p.position not in pad_index)
    if unresolved:
        return AlignmentReport(pad_count, pin_count,
                               AlignmentReason.UNRESOLVED_POSITION, unresolved)

    seen = Counter(p.position for p in pins)
    duplicates = tuple(pos for pos, n in seen.items() if n > 1)
    if duplicates:
        return AlignmentReport(pad_count, pin_count,
                               AlignmentReason.DUPLICATE_POSITION, duplicates)

    return AlignmentReport(pad_count, pin_count)


def check_alignment(pad_index: Mapping[str, str],
                    pins: Sequence[RawPin]) -> AlignmentReport:
    """validate_alignment() that raises AlignmentError instead of returning a failure."""
    report = validate_alignment(pad_index, pins)
    report.raise_for_failure()
    return report
