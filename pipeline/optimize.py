"""pipeline.optimize

Post-process raw fleet binaries with ``wasm-opt``.

Profiles
--------
Release: ``-O4``, DWARF stripped, plus asyncify.
Debug:   ``-O0``, debug info kept (``-g``), plus asyncify.

Asyncify is in both profiles. The simulator drives every fleet cooperatively
inside one process and suspends a fleet whenever it calls the sandbox's
yield import; a module without the rewrite cannot be paused there.

Output is written to a hidden temp file in the fleet directory and renamed
into place only after ``wasm-opt`` succeeds, so a failed run never leaves a
same-named artifact for the battle command to pick up.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from pipeline.core import DEFAULT_ASYNCIFY_IMPORTS
from protologic_fleets.domain import (
    FEATURE_BULK_MEMORY,
    FEATURE_SIMD,
    PASS_ASYNCIFY,
    PASS_STRIP_DWARF,
    FleetArtifact,
    OptimizationProfile,
    PassSpec,
    RawArtifact,
)
from protologic_fleets.errors import OptimizeFailure, ProcessSpawnError
from protologic_fleets.io import atomic_output_path, ensure_fleet_dir, extract_fleet_name, fleet_output_path
from tools.wasm_opt import wasm_opt_command

logger = logging.getLogger(__name__)

_UNITS = ("B", "KiB", "MiB", "GiB", "TiB")


def format_bytes(n: int) -> str:
    """Human-readable binary size: ``512 B``, ``1.5 KiB``, ``3.2 MiB``."""
    if n < 1024:
        return f"{n} B"
    size = float(n)
    unit = _UNITS[0]
    for unit in _UNITS[1:]:
        size /= 1024
        if size < 1024:
            break
    return f"{size:.1f} {unit}"


def make_profile(debug: bool, asyncify_imports: Sequence[str] = DEFAULT_ASYNCIFY_IMPORTS) -> OptimizationProfile:
    passes: List[PassSpec] = []
    if not debug:
        passes.append(PassSpec(PASS_STRIP_DWARF))

    asyncify_args = {}
    if asyncify_imports:
        asyncify_args["asyncify-imports"] = ",".join(asyncify_imports)
    passes.append(PassSpec(PASS_ASYNCIFY, asyncify_args))

    return OptimizationProfile(
        level="O0" if debug else "O4",
        debug_info=debug,
        features=(FEATURE_BULK_MEMORY, FEATURE_SIMD),
        passes=tuple(passes),
    )


def optimize_artifact(
    artifact: RawArtifact,
    profile: OptimizationProfile,
    *,
    fleet_dir: Path,
    runner,
    wasm_opt_bin: str,
) -> FleetArtifact:
    """Optimize one raw binary into the fleet directory."""
    fleet_name = extract_fleet_name(artifact.path)
    input_size = artifact.path.stat().st_size

    ensure_fleet_dir(fleet_dir)
    output_path = fleet_output_path(fleet_dir, artifact.file_name)

    try:
        with atomic_output_path(output_path) as tmp_path:
            cmd = wasm_opt_command(wasm_opt_bin, artifact.path, tmp_path, profile)
            try:
                res = runner.run(cmd, capture=True)
            except ProcessSpawnError as e:
                raise OptimizeFailure(fleet_name, str(e)) from e

            if res.exit_code != 0:
                cause = (res.stderr or res.stdout).strip() or f"wasm-opt exited with status {res.exit_code}"
                raise OptimizeFailure(fleet_name, cause)
            if not tmp_path.exists() or tmp_path.stat().st_size == 0:
                raise OptimizeFailure(fleet_name, "wasm-opt produced no output")
    except OSError as e:
        raise OptimizeFailure(fleet_name, str(e)) from e

    output_size = output_path.stat().st_size
    print(
        f"[Optimizing wasm] Fleet '{fleet_name}' optimized "
        f"{format_bytes(input_size)} -> {format_bytes(output_size)}"
    )
    return FleetArtifact(fleet_name=fleet_name, path=output_path)


def optimize_all(
    artifacts: Iterable[RawArtifact],
    profile: OptimizationProfile,
    *,
    fleet_dir: Path,
    runner,
    wasm_opt_bin: str,
) -> List[FleetArtifact]:
    """Optimize every artifact in order; the first failure aborts the batch."""
    fleets: List[FleetArtifact] = []
    for artifact in artifacts:
        fleets.append(
            optimize_artifact(
                artifact,
                profile,
                fleet_dir=fleet_dir,
                runner=runner,
                wasm_opt_bin=wasm_opt_bin,
            )
        )
    logger.debug("Optimized %d fleet(s) into %s", len(fleets), fleet_dir)
    return fleets
