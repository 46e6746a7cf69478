"""
import_engine - CubeMX pin table → Horizon unit / entity / part.

Public API:
    convert(package_record, pin_source, name=…)  → ImportResult  (pure)
    run_import(configuration, dry_run=False)      → ImportResult  (reads + writes)
    validate_alignment(pad_index, pins)           → AlignmentReport
"""

from import_engine.alignment import AlignmentReport, validate_alignment  # noqa: F401
from import_engine.errors import (                                       # noqa: F401
    AlignmentError,
    AlignmentReason,
    FormatError,
    PoolImportError,
    SchemaError,
    UnknownPinTypeError,
)
from import_engine.importer import ImportResult, convert, run_import, synthesize  # noqa: F401
from import_engine.report import ImportReport                            # noqa: F401
