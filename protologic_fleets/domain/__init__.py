"""protologic_fleets.domain

Domain objects passed between the build and battle stages.

Everything here is a small frozen dataclass: the filesystem is the only
persisted state, so these objects are re-derived at the start of every
command and never cached.
"""

from __future__ import annotations

from .fleet import BattleRun, FleetArtifact, FleetPair, RawArtifact
from .profile import (
    FEATURE_BULK_MEMORY,
    FEATURE_SIMD,
    PASS_ASYNCIFY,
    PASS_STRIP_DWARF,
    OptimizationProfile,
    OptLevel,
    PassSpec,
)

__all__ = [
    "BattleRun",
    "FEATURE_BULK_MEMORY",
    "FEATURE_SIMD",
    "FleetArtifact",
    "FleetPair",
    "OptLevel",
    "OptimizationProfile",
    "PASS_ASYNCIFY",
    "PASS_STRIP_DWARF",
    "PassSpec",
    "RawArtifact",
]
