"""tools/cargo

Cargo integration: the workspace metadata query and the per-package wasm
build command. Only command lines live here; sequencing and error handling
belong to the pipeline.
"""

from __future__ import annotations

from .runner import CRATE_TYPE, metadata_command, rustc_command

__all__ = ["CRATE_TYPE", "metadata_command", "rustc_command"]
