from __future__ import annotations

import argparse
from pathlib import Path


def add_run_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--protologic-path",
        type=Path,
        default=None,
        help=(
            "Location of the Protologic/Release checkout. "
            "Falls back to PROTOLOGIC_PATH (shell or .env) or protologic_path in the config file."
        ),
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Pass --debug true to the Protologic sim.",
    )
    parser.add_argument(
        "-p",
        "--player",
        action="store_true",
        help="Open the replay in the Protologic player once the sim finishes.",
    )
