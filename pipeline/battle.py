"""pipeline.battle

Run one battle between the two built fleets.

The battle identifier and the simulator's output path are the same string,
``<unix seconds>_<fleet1>_<fleet2>`` under the working directory, so nothing
has to be allocated or recorded. Battles are never retried: the simulator
may seed itself differently on each run, so a retry would be a different
battle.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional

from pipeline.models import BattleOutcome
from protologic_fleets.domain import BattleRun, FleetPair
from protologic_fleets.errors import SimulatorFailure, WrongFleetCount
from protologic_fleets.io import battle_output_path, find_built_fleets, replay_path
from tools.protologic import player_command, simulator_command

logger = logging.getLogger(__name__)

Locator = Callable[[], Path]


def select_pair(fleet_dir: Path) -> FleetPair:
    fleets = find_built_fleets(fleet_dir)
    if len(fleets) != 2:
        raise WrongFleetCount(len(fleets), fleet_dir)
    return FleetPair(first=fleets[0], second=fleets[1])


def run_battle(
    fleet_dir: Path,
    *,
    debug: bool,
    open_player: bool,
    simulator_locator: Locator,
    player_locator: Locator,
    runner,
    clock: Callable[[], float] = time.time,
    cwd: Optional[Path] = None,
) -> BattleOutcome:
    pair = select_pair(fleet_dir)

    # Resolve the player up front so an unsupported platform fails before
    # the simulation rather than after it.
    player_bin = player_locator() if open_player else None
    sim_bin = simulator_locator()

    name1, name2 = pair.names
    timestamp = int(clock())
    output_path = battle_output_path(cwd or Path.cwd(), timestamp, name1, name2)
    run = BattleRun(pair=pair, timestamp=timestamp, output_path=output_path)

    print(f"⚔️  Starting the protologic sim: {name1} vs {name2}")
    res = runner.run(simulator_command(sim_bin, *pair.paths, debug=debug, output_path=output_path))
    if res.exit_code != 0:
        raise SimulatorFailure(res.exit_code, output_path)
    print("✅ Protologic sim complete!")

    replay = replay_path(output_path)
    launched = False
    if player_bin is not None:
        cmd = player_command(player_bin, replay)
        print("🎬 Starting the protologic player! The command will exit now.")
        logger.info("Command to open player: %s", " ".join(cmd))
        runner.spawn_detached(cmd)
        launched = True

    return BattleOutcome(run=run, replay_path=replay, player_launched=launched)
