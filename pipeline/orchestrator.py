"""pipeline.orchestrator

High-level orchestration entrypoints for the three commands.

Design principles
-----------------
- Keep the CLI thin: parse args + build a request + call a function here.
- Resolve the workspace at most once per command.
- Re-derive every piece of state (raw artifacts, built fleets) from disk at
  the start of the command; never cache it.
- Stop at the first failure and let the error propagate; whatever earlier
  steps wrote stays on disk.

Build:  workspace -> build driver -> artifact scanner -> optimizer
List:   fleet registry -> names
Run:    fleet registry -> names -> battle
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, List, Optional

from pipeline.battle import run_battle
from pipeline.build_driver import build_packages, select_packages
from pipeline.models import BattleOutcome, BattleRequest, BuildOutcome, BuildRequest
from pipeline.optimize import make_profile, optimize_all
from pipeline.platforms import PlatformKind, player_path, simulator_path
from pipeline.settings import Settings
from pipeline.workspace import resolve_workspace
from protologic_fleets.domain import FleetArtifact
from protologic_fleets.io import find_built_fleets, raw_output_dir, scan_raw_artifacts

logger = logging.getLogger(__name__)


def run_build(req: BuildRequest, *, settings: Settings, runner) -> BuildOutcome:
    workspace = resolve_workspace(runner, cargo_bin=settings.cargo)
    packages = select_packages(req.packages, workspace.default_packages)

    print("Building packages...")
    build_packages(
        packages,
        debug=req.debug,
        runner=runner,
        cargo_bin=settings.cargo,
        target=settings.target_triple,
    )

    output_dir = raw_output_dir(workspace.output_root, settings.target_triple, req.debug)
    artifacts = scan_raw_artifacts(output_dir)
    if not artifacts:
        print("No wasm output found. Your build didn't produce any .wasm files! Nothing to optimize.")
        return BuildOutcome(packages=packages)

    profile = make_profile(req.debug, settings.asyncify_imports)
    logger.debug("Optimization profile: %s", profile)

    print("Optimizing wasm outputs...")
    fleets = optimize_all(
        artifacts,
        profile,
        fleet_dir=settings.fleet_dir,
        runner=runner,
        wasm_opt_bin=settings.wasm_opt,
    )
    print("Done optimizing!")
    return BuildOutcome(packages=packages, fleets=fleets)


def list_fleets(*, settings: Settings) -> List[FleetArtifact]:
    return find_built_fleets(settings.fleet_dir)


def run_battle_request(
    req: BattleRequest,
    *,
    settings: Settings,
    runner,
    platform: PlatformKind,
    clock: Callable[[], float] = time.time,
    cwd: Optional[Path] = None,
) -> BattleOutcome:
    return run_battle(
        settings.fleet_dir,
        debug=req.debug,
        open_player=req.open_player,
        simulator_locator=lambda: simulator_path(req.protologic_path, platform),
        player_locator=lambda: player_path(req.protologic_path, platform),
        runner=runner,
        clock=clock,
        cwd=cwd,
    )
