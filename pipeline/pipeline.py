"""pipeline.pipeline

A single, high-level object that represents this repo's capabilities.

Callers (the CLI, scripts, tests) use :class:`FleetPipeline` instead of
wiring the orchestrator, settings and process runner together themselves:

- ``build(...)``: compile and optimize fleets
- ``list_fleets()``: the built fleets currently on disk
- ``battle(...)``: run the simulator on the two built fleets

The facade holds configuration and collaborators only. It never caches
fleets or artifacts; each call re-reads the filesystem.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, List, Optional

from pipeline.models import BattleOutcome, BattleRequest, BuildOutcome, BuildRequest
from pipeline.orchestrator import list_fleets, run_battle_request, run_build
from pipeline.platforms import PlatformKind, detect_platform
from pipeline.settings import Settings
from protologic_fleets.domain import FleetArtifact


class FleetPipeline:
    """High-level facade over the build/list/run flows.

    Build it via :func:`pipeline.wiring.build_pipeline`; tests construct it
    directly with a fake runner, clock and working directory.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        runner,
        platform: Optional[PlatformKind] = None,
        clock: Callable[[], float] = time.time,
        cwd: Optional[Path] = None,
    ) -> None:
        self.settings = settings
        self._runner = runner
        self._platform = platform or detect_platform()
        self._clock = clock
        self._cwd = cwd

    def build(self, req: BuildRequest) -> BuildOutcome:
        return run_build(req, settings=self.settings, runner=self._runner)

    def list_fleets(self) -> List[FleetArtifact]:
        return list_fleets(settings=self.settings)

    def battle(self, req: BattleRequest) -> BattleOutcome:
        return run_battle_request(
            req,
            settings=self.settings,
            runner=self._runner,
            platform=self._platform,
            clock=self._clock,
            cwd=self._cwd,
        )
