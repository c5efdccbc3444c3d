"""protologic_fleets.domain.fleet

Artifacts produced and consumed by the build and battle commands.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class RawArtifact:
    """A ``.wasm`` file straight out of the toolchain's target directory."""

    path: Path

    @property
    def file_name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class FleetArtifact:
    """An optimized fleet binary inside the fleet-output directory."""

    fleet_name: str
    path: Path


@dataclass(frozen=True)
class FleetPair:
    """The two fleets of one battle, in registry order."""

    first: FleetArtifact
    second: FleetArtifact

    @property
    def names(self) -> Tuple[str, str]:
        return self.first.fleet_name, self.second.fleet_name

    @property
    def paths(self) -> Tuple[Path, Path]:
        return self.first.path, self.second.path


@dataclass(frozen=True)
class BattleRun:
    """One simulator invocation.

    ``output_path`` doubles as the battle identifier
    (``<unix seconds>_<fleet1>_<fleet2>``); the replay path is always
    re-derived from it rather than stored.
    """

    pair: FleetPair
    timestamp: int
    output_path: Path
