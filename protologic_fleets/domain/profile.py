"""protologic_fleets.domain.profile

Binary optimizer configuration.

A profile is pure data: which optimization level to run, whether to keep
DWARF debug info, which wasm features to enable and which extra passes to
append (in order) after the level's default pipeline. Turning it into a
``wasm-opt`` command line is the job of :mod:`tools.wasm_opt.runner`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Tuple

OptLevel = Literal["O0", "O1", "O2", "O3", "O4", "Os", "Oz"]

OPT_LEVELS: Tuple[str, ...] = ("O0", "O1", "O2", "O3", "O4", "Os", "Oz")

# wasm-opt feature names (used as --enable-<feature>)
FEATURE_BULK_MEMORY = "bulk-memory"
FEATURE_SIMD = "simd"

# Pass names used by the fleet profiles.
PASS_ASYNCIFY = "asyncify"
PASS_STRIP_DWARF = "strip-dwarf"


@dataclass(frozen=True)
class PassSpec:
    """One named optimizer pass plus its ``--pass-arg`` key/value pairs."""

    name: str
    args: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class OptimizationProfile:
    level: OptLevel
    debug_info: bool
    features: Tuple[str, ...] = ()
    passes: Tuple[PassSpec, ...] = ()

    def __post_init__(self) -> None:
        if self.level not in OPT_LEVELS:
            raise ValueError(f"Unknown optimization level {self.level!r}. Valid: {list(OPT_LEVELS)}")

    def has_pass(self, name: str) -> bool:
        return any(p.name == name for p in self.passes)
