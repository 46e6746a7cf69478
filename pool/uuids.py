"""
pool.uuids - Identifier minting.

Every record, pin and gate gets a fresh uuid4 per run; nothing is reused.
Builders take the factory as a parameter so callers can substitute a
deterministic sequence.
"""

from __future__ import annotations

import uuid
from typing import Callable

UuidFactory = Callable[[], str]


def new_uuid() -> str:
    """Return a fresh random identifier in canonical text form."""
    return str(uuid.uuid4())
