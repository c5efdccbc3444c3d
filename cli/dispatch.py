from __future__ import annotations

import argparse
from typing import Callable, Dict

from cli.commands.build import run_build
from cli.commands.list_fleets import run_list
from cli.commands.run import run_battle
from pipeline.pipeline import FleetPipeline

COMMANDS: Dict[str, Callable[[argparse.Namespace, FleetPipeline], int]] = {
    "build": run_build,
    "list": run_list,
    "run": run_battle,
}


def dispatch(args: argparse.Namespace, pipeline: FleetPipeline) -> int:
    handler = COMMANDS.get(args.command)
    if handler is None:
        raise SystemExit(f"Unknown command: {args.command!r}. Valid: {sorted(COMMANDS)}")
    return int(handler(args, pipeline))
