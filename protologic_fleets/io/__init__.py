"""protologic_fleets.io

Filesystem contracts and IO helpers.

Design principle
----------------
The artifact layout is a public contract: the build command writes it, the
list and run commands read it back. Keeping the "where do files go" and "what
is a fleet called" rules in one module stops them from drifting between
commands.
"""

from __future__ import annotations

from .fs import atomic_output_path
from .layout import (
    DEFAULT_FLEET_DIR,
    REPLAY_SUFFIX,
    WASM_SUFFIX,
    battle_output_path,
    ensure_fleet_dir,
    find_built_fleets,
    fleet_output_path,
    raw_output_dir,
    replay_path,
    scan_raw_artifacts,
)
from .naming import extract_fleet_name

__all__ = [
    "DEFAULT_FLEET_DIR",
    "REPLAY_SUFFIX",
    "WASM_SUFFIX",
    "atomic_output_path",
    "battle_output_path",
    "ensure_fleet_dir",
    "extract_fleet_name",
    "find_built_fleets",
    "fleet_output_path",
    "raw_output_dir",
    "replay_path",
    "scan_raw_artifacts",
]
