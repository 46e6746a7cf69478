"""
import_engine.errors - Failure taxonomy of an import run.

Every error is fatal for the run it belongs to: nothing is retried and
nothing is written.  Each carries a ``details`` dict with the offending
keys / counts so the operator can fix the input; the API returns it as-is.
"""

from __future__ import annotations

import enum
from typing import Optional


class PoolImportError(Exception):
    """Base class for all input problems detected during an import."""

    kind = "import_error"

    def __init__(self, message: str, **details):
        super().__init__(message)
        self.details = details

    def to_dict(self) -> dict:
        return {"error": str(self), "kind": self.kind, "details": self.details}


class SchemaError(PoolImportError):
    """The package record does not have the expected shape."""

    kind = "schema_error"

    DUPLICATE_PAD_NAME = "DUPLICATE_PAD_NAME"

    def __init__(self, message: str, code: Optional[str] = None, **details):
        super().__init__(message, **details)
        self.code = code

    def to_dict(self) -> dict:
        d = super().to_dict()
        if self.code:
            d["reason"] = self.code
        return d


class FormatError(PoolImportError):
    """The pin table cannot be read as a CubeMX MCU description."""

    kind = "format_error"


class AlignmentReason(str, enum.Enum):
    CARDINALITY_MISMATCH = "CARDINALITY_MISMATCH"
    UNRESOLVED_POSITION = "UNRESOLVED_POSITION"
    DUPLICATE_POSITION = "DUPLICATE_POSITION"


class AlignmentError(PoolImportError):
    """Package and pin table describe different devices."""

    kind = "alignment_error"

    def __init__(self, reason: AlignmentReason, message: str, **details):
        super().__init__(message, **details)
        self.reason = reason

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["reason"] = self.reason.value
        return d


class UnknownPinTypeError(PoolImportError):
    """A pin's electrical type has no direction mapping."""

    kind = "unknown_pin_type"

    def __init__(self, pin_type: str, position: str = ""):
        where = f" at position {position}" if position else ""
        super().__init__(f"Unknown pin type: {pin_type!r}{where}",
                         pin_type=pin_type, position=position)
        self.pin_type = pin_type
        self.position = position
