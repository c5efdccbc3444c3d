"""tools/cargo/runner.py

Cargo command lines.
"""

from __future__ import annotations

from typing import List

METADATA_FORMAT_VERSION = "1"

# rustc only emits a .wasm artifact for cdylib crates.
CRATE_TYPE = "cdylib"


def metadata_command(cargo_bin: str) -> List[str]:
    return [cargo_bin, "metadata", "--format-version", METADATA_FORMAT_VERSION]


def rustc_command(cargo_bin: str, package: str, *, target: str, debug: bool) -> List[str]:
    # `rustc` instead of `build` so we can pass --crate-type.
    cmd = [
        cargo_bin,
        "rustc",
        "-p",
        package,
        "--crate-type",
        CRATE_TYPE,
        "--target",
        target,
    ]
    if not debug:
        cmd.append("--release")
    return cmd
