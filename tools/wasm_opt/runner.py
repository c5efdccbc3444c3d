"""tools/wasm_opt/runner.py

Tool-specific command building for Binaryen's ``wasm-opt``.

Passes run in the order given on the command line, so the level flag comes
first (the default optimization pipeline) followed by the profile's extra
passes, matching how Binaryen's own API appends passes after the defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from protologic_fleets.domain import OptimizationProfile

WASM_OPT_FALLBACKS = ["/opt/homebrew/bin/wasm-opt", "/usr/local/bin/wasm-opt"]


def profile_args(profile: OptimizationProfile) -> List[str]:
    args: List[str] = [f"-{profile.level}"]

    if profile.debug_info:
        args.append("-g")

    for feature in profile.features:
        args.append(f"--enable-{feature}")

    pass_args: List[str] = []
    for p in profile.passes:
        args.append(f"--{p.name}")
        for key, value in p.args.items():
            pass_args.append(f"--pass-arg={key}@{value}")

    return args + pass_args


def wasm_opt_command(
    wasm_opt_bin: str,
    input_path: Path,
    output_path: Path,
    profile: OptimizationProfile,
) -> List[str]:
    return [wasm_opt_bin, str(input_path), *profile_args(profile), "-o", str(output_path)]
