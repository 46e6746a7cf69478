"""
pool - Horizon pool records and on-disk conventions.

Public API:
    records.Unit / Entity / Part     → immutable pool records
    uuids.new_uuid                   → identifier factory
    writer.write_records             → all-or-nothing publish
"""

from pool.records import (                          # noqa: F401
    Entity,
    Gate,
    NormalizedPin,
    PackageRecord,
    Part,
    PadMapEntry,
    RawPin,
    Unit,
)
from pool.uuids import new_uuid                      # noqa: F401
from pool.writer import write_records, record_paths  # noqa: F401
