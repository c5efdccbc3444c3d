"""tools/wasm_opt

Binaryen ``wasm-opt`` integration.

`runner.py` turns an :class:`~protologic_fleets.domain.OptimizationProfile`
into a ``wasm-opt`` command line.
"""

from __future__ import annotations

from .runner import WASM_OPT_FALLBACKS, profile_args, wasm_opt_command

__all__ = ["WASM_OPT_FALLBACKS", "profile_args", "wasm_opt_command"]
