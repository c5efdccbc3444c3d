"""protologic_fleets.io.layout

Canonical filesystem layout.

The filesystem *is* the registry of this tool:

* ``<target_directory>/<target_triple>/<debug|release>/*.wasm``
  raw toolchain output (ephemeral, rescanned on every build)
* ``./target/protologic_fleets/*.wasm``
  optimized fleets (the durable "list of built fleets")
* ``<cwd>/<unix seconds>_<fleet1>_<fleet2>[.json|.json.deflate]``
  battle replays written by the simulator

Every command re-derives its view of these directories from disk, so these
helpers are plain functions with no cached state.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from protologic_fleets.domain import FleetArtifact, RawArtifact
from protologic_fleets.errors import OutputDirMissing

from .naming import extract_fleet_name

WASM_SUFFIX = ".wasm"
REPLAY_SUFFIX = ".json.deflate"

DEFAULT_FLEET_DIR = Path("target") / "protologic_fleets"


def _is_wasm_file(path: Path) -> bool:
    # Hidden entries are in-flight temporaries from the optimizer.
    return path.is_file() and path.suffix == WASM_SUFFIX and not path.name.startswith(".")


def raw_output_dir(output_root: Path, target_triple: str, debug: bool) -> Path:
    """Directory the toolchain writes ``.wasm`` files to for this profile."""
    profile = "debug" if debug else "release"
    return Path(output_root) / target_triple / profile


def scan_raw_artifacts(output_dir: Path) -> List[RawArtifact]:
    """List freshly built wasm binaries, sorted by file name.

    An empty list is a legitimate result (nothing to optimize); a missing
    directory is not.
    """
    d = Path(output_dir)
    if not d.is_dir():
        raise OutputDirMissing(d)
    entries = sorted((p for p in d.iterdir() if _is_wasm_file(p)), key=lambda p: p.name)
    return [RawArtifact(path=p) for p in entries]


def ensure_fleet_dir(fleet_dir: Path) -> Path:
    d = Path(fleet_dir)
    d.mkdir(parents=True, exist_ok=True)
    return d


def fleet_output_path(fleet_dir: Path, input_file_name: str) -> Path:
    return Path(fleet_dir) / input_file_name


def find_built_fleets(fleet_dir: Path) -> List[FleetArtifact]:
    """Return the built fleets, in lexicographic file name order.

    A missing fleet directory just means nothing was built yet.
    """
    d = Path(fleet_dir)
    if not d.is_dir():
        return []
    paths = sorted((p for p in d.iterdir() if _is_wasm_file(p)), key=lambda p: p.name)
    return [FleetArtifact(fleet_name=extract_fleet_name(p), path=p) for p in paths]


def battle_output_path(cwd: Path, timestamp: int, fleet1_name: str, fleet2_name: str) -> Path:
    return Path(cwd) / f"{int(timestamp)}_{fleet1_name}_{fleet2_name}"


def replay_path(battle_output: Path) -> Path:
    """Compressed replay the simulator writes next to ``battle_output``."""
    p = Path(battle_output)
    return p.with_name(p.name + REPLAY_SUFFIX)
