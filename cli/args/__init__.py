"""CLI argument builder modules.

The top-level :mod:`cargo_protologic` is intentionally kept thin. Each
subcommand registers its flags via a small "arg builder" function housed
here:

- :func:`cli.args.base.add_base_args`
- :func:`cli.args.build.add_build_args`
- :func:`cli.args.run.add_run_args`
"""

from __future__ import annotations

__all__ = [
    "base",
    "build",
    "run",
]
