from __future__ import annotations

import argparse
from pathlib import Path

from pipeline.core import CONFIG_FILENAME


def add_base_args(parser: argparse.ArgumentParser) -> None:
    """Register flags shared by every subcommand."""

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"YAML config file (default: ./{CONFIG_FILENAME} when present).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log external commands and resolved settings.",
    )
