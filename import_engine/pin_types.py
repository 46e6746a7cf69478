"""
import_engine.pin_types - CubeMX pin type → Horizon pin direction.

The table is closed: a type missing here is an error, never a default,
because a guessed direction would feed wrong data into ERC downstream.
"""

# CubeMX "Type" attribute  →  Horizon unit pin "direction"
TYPE_TO_DIRECTION: dict[str, str] = {
    "Reset": "input",
    "Boot":  "input",
    "I/O":   "bidirectional",
    "Power": "power_input",
}

# CubeMX appends alternate-function hints after a dash ("PA2-WKUP");
# only the part before the first one is the pin's own name.
NAME_SEPARATOR = "-"

# Pins carry no swap information in the pin table
DEFAULT_SWAP_GROUP = 0
