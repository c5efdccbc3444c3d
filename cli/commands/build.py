from __future__ import annotations

from pipeline.models import BuildRequest
from pipeline.pipeline import FleetPipeline


def run_build(args, pipeline: FleetPipeline) -> int:
    req = BuildRequest(packages=args.packages, debug=bool(args.debug))
    outcome = pipeline.build(req)

    if outcome.nothing_to_optimize:
        print(f"\nℹ️  Built {len(outcome.packages)} package(s); nothing to optimize.")
    else:
        print(f"\n✅ {len(outcome.fleets)} fleet(s) ready in {pipeline.settings.fleet_dir}")
    return 0
