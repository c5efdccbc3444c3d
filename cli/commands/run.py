from __future__ import annotations

from pipeline.models import BattleRequest
from pipeline.pipeline import FleetPipeline


def run_battle(args, pipeline: FleetPipeline) -> int:
    req = BattleRequest(
        protologic_path=pipeline.settings.require_protologic_path(),
        debug=bool(args.debug),
        open_player=bool(args.player),
    )
    outcome = pipeline.battle(req)
    print(f"📼 Replay: {outcome.replay_path}")
    return 0
