"""pipeline.models

Lightweight request/outcome records passed between the CLI and the
orchestration layer.

These dataclasses provide a small, explicit vocabulary for:
- what to build (BuildRequest) and what came out of it (BuildOutcome)
- which battle to run (BattleRequest) and what it produced (BattleOutcome)
- what the workspace looks like (WorkspaceInfo)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from protologic_fleets.domain import BattleRun, FleetArtifact


@dataclass(frozen=True)
class WorkspaceInfo:
    """The two fields of ``cargo metadata`` this tool relies on."""

    default_packages: List[str]
    output_root: Path


@dataclass(frozen=True)
class BuildRequest:
    """Packages to build. ``None`` means the workspace default members."""

    packages: Optional[List[str]] = None
    debug: bool = False


@dataclass(frozen=True)
class BuildOutcome:
    packages: List[str]
    fleets: List[FleetArtifact] = field(default_factory=list)

    @property
    def nothing_to_optimize(self) -> bool:
        return not self.fleets


@dataclass(frozen=True)
class BattleRequest:
    protologic_path: Path
    debug: bool = False
    open_player: bool = False


@dataclass(frozen=True)
class BattleOutcome:
    run: BattleRun
    replay_path: Path
    player_launched: bool = False
