# pipeline/core.py
from __future__ import annotations

from pathlib import Path
from typing import Tuple

from protologic_fleets.io import DEFAULT_FLEET_DIR

# Target triple rustc builds fleets for.
WASI_TARGET = "wasm32-wasi"

DEFAULT_CARGO = "cargo"
DEFAULT_WASM_OPT = "wasm-opt"

# Host imports that block (the sandbox's voluntary yield). Asyncify rewrites
# calls to these so the simulator can suspend and resume a fleet.
DEFAULT_ASYNCIFY_IMPORTS: Tuple[str, ...] = ("wasi_snapshot_preview1.sched_yield",)

CONFIG_FILENAME = "protologic.yaml"
ENV_FILENAME = ".env"

FLEET_DIR: Path = DEFAULT_FLEET_DIR
