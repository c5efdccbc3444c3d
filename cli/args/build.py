from __future__ import annotations

import argparse


def add_build_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-p",
        "--package",
        dest="packages",
        action="append",
        default=None,
        metavar="PACKAGE",
        help="Package to build. May be repeated! Defaults to the workspace default-members.",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Debug build: no --release and no wasm-opt optimizations. Makes things very slow!",
    )
