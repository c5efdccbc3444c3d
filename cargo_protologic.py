#!/usr/bin/env python3
"""
A helper for creating Protologic fleets in Rust.

Installed as ``cargo-protologic`` so cargo picks it up as an external
subcommand. Cargo calls it as ``cargo-protologic protologic <command>``; the
leading ``protologic`` is dropped, so running ``cargo-protologic <command>``
directly works too.

Usage:
  cargo protologic build                  # all workspace default-members
  cargo protologic build -p my_fleet -p other_fleet --debug
  cargo protologic list
  cargo protologic run --protologic-path ~/Protologic/Release --player
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from cli.args.base import add_base_args
from cli.args.build import add_build_args
from cli.args.run import add_run_args
from cli.dispatch import dispatch
from pipeline.wiring import build_pipeline
from protologic_fleets import __version__
from protologic_fleets.errors import ProtologicError

CARGO_SUBCOMMAND = "protologic"

logger = logging.getLogger("cargo_protologic")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cargo protologic",
        description="A helper for creating Protologic fleets in Rust!",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    add_base_args(parser)

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    build = sub.add_parser(
        "build",
        help="Build Protologic fleets from the cargo workspace.",
        description=(
            "Builds Protologic fleets from the cargo workspace. With no argument it builds the "
            "default members of the workspace; pass --package to pick packages explicitly."
        ),
    )
    add_build_args(build)

    sub.add_parser("list", help="List all built fleets. If you see none, try building them!")

    run = sub.add_parser(
        "run",
        help="Run a battle between the two built fleets.",
        description=(
            "Run a battle between two fleets. The replay file is put in your current directory. "
            "Requires exactly two built fleets. Optionally opens the replay in the player."
        ),
    )
    add_run_args(run)
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == CARGO_SUBCOMMAND:
        args = args[1:]
    return build_parser().parse_args(args)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    overrides = {}
    if getattr(args, "protologic_path", None) is not None:
        overrides["protologic_path"] = args.protologic_path

    try:
        pipeline = build_pipeline(
            config_path=args.config,
            overrides=overrides,
            verbose=bool(args.verbose),
        )
        logger.debug("Command: %s", vars(args))
        return dispatch(args, pipeline)
    except ProtologicError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
