from __future__ import annotations

from pipeline.pipeline import FleetPipeline


def run_list(args, pipeline: FleetPipeline) -> int:
    print("Listing built fleets...")
    fleets = pipeline.list_fleets()
    if not fleets:
        print("No fleets found. Try `cargo protologic build` first!")
        return 0
    for fleet in fleets:
        print(f"Found fleet: {fleet.fleet_name} ({fleet.path})")
    return 0
