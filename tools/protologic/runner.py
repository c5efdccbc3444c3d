"""tools/protologic/runner.py

Simulator / player invocations.

The simulator writes ``<output>.json`` plus a compressed
``<output>.json.deflate`` sibling; the player only takes the latter.
"""

from __future__ import annotations

from pathlib import Path
from typing import List


def simulator_command(
    sim_bin: Path,
    fleet1: Path,
    fleet2: Path,
    *,
    debug: bool,
    output_path: Path,
) -> List[str]:
    return [
        str(sim_bin),
        "--fleets",
        str(fleet1),
        str(fleet2),
        "--debug",
        "true" if debug else "false",
        "--output",
        str(output_path),
    ]


def player_command(player_bin: Path, replay: Path) -> List[str]:
    return [str(player_bin), str(replay)]
