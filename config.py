"""
stm2horizon - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.  A .env file next to this
module (or in the working directory) is loaded first.

Per-run inputs (pool, package, XML, part name …) are gathered once into
a Configuration by resolve_configuration(): command-line value, then
environment, then an interactive prompt.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Callable, Optional

import dotenv

BASE_DIR = Path(__file__).resolve().parent
dotenv.load_dotenv(BASE_DIR / ".env")
dotenv.load_dotenv()                                 # cwd, never overrides

# ── Device family defaults ─────────────────────────────────────────────
MANUFACTURER = os.environ.get("STM2HORIZON_MANUFACTURER", "ST")
PREFIX       = os.environ.get("STM2HORIZON_PREFIX", "U")
TAGS         = tuple(
    t.strip() for t in
    os.environ.get("STM2HORIZON_TAGS", "arm,ic,mcu,stm32").split(",")
    if t.strip()
)

# ── Pool layout ────────────────────────────────────────────────────────
# Records land in <pool>/{units,entities,parts}/<POOL_SUBDIR>/<name>.json
POOL_SUBDIR = os.environ.get("STM2HORIZON_POOL_SUBDIR", "ic/mcu/stm")
JSON_INDENT = 4

# ── Server ─────────────────────────────────────────────────────────────
HOST  = os.environ.get("STM2HORIZON_HOST", "127.0.0.1")
PORT  = int(os.environ.get("STM2HORIZON_PORT", "5000"))
DEBUG = os.environ.get("STM2HORIZON_DEBUG", "0") == "1"

# ── Prompts ────────────────────────────────────────────────────────────
CAPTION_WIDTH = 20

# field name → (prompt caption, environment variable)
PROMPTS: dict[str, tuple[str, str]] = {
    "pool_path":     ("Pool Path?",        "POOL_PATH"),
    "package_path":  ("Package Path?",     "PACKAGE_PATH"),
    "xml_path":      ("QubeMX XML Path?",  "XML_PATH"),
    "part_name":     ("Part Name?",        "PART_NAME"),
    "datasheet_url": ("Datasheet URL?",    "DATASHEET_URL"),
    "description":   ("Description?",      "DESCRIPTION"),
}


@dataclass(frozen=True)
class Configuration:
    pool_path: str
    package_path: str
    xml_path: str
    part_name: str
    datasheet_url: str = ""
    description: str = ""


def resolve_configuration(
    overrides: Optional[dict] = None,
    *,
    prompt: Optional[Callable[[str], str]] = None,
    echo: Optional[Callable[[str], None]] = None,
) -> Configuration:
    """
    Build a Configuration.  For each field: a non-empty override wins,
    then the environment variable (echoed so the operator sees what was
    used), then ``prompt``.
    """
    overrides = overrides or {}
    prompt = prompt or input
    echo = echo or print
    values = {}
    for f in fields(Configuration):
        caption, env = PROMPTS[f.name]
        caption = caption.ljust(CAPTION_WIDTH)
        value = overrides.get(f.name)
        if value:
            echo(caption + str(value))
        elif os.environ.get(env):
            value = os.environ[env]
            echo(caption + value)
        else:
            value = prompt(caption).strip()
        values[f.name] = value

    missing = [name for name in ("pool_path", "package_path", "xml_path", "part_name")
               if not values[name]]
    if missing:
        raise ValueError(f"Missing required setting(s): {', '.join(missing)}")
    return Configuration(**values)
