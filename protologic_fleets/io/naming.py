"""protologic_fleets.io.naming

Fleet identifiers derived from artifact file names.

The fleet name is the artifact's file stem. It is used both for display and
for building battle output file names, so it must be derived the same way
everywhere.
"""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Union

from protologic_fleets.errors import MissingFileName, NonUnicodeName

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def extract_fleet_name(fleet_path: PathInput) -> str:
    """Take the path to a fleet and return the name of the fleet.

    The last extension is dropped unconditionally (``demo.wasm`` -> ``demo``,
    ``demo`` -> ``demo``). Uniqueness between two fleets is the caller's
    concern.

    Raises :class:`MissingFileName` when the path has no file component and
    :class:`NonUnicodeName` when the name is not valid unicode.
    """

    raw = os.fspath(fleet_path)
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise NonUnicodeName(fleet_path) from e

    name = PurePath(raw).name
    if not name or name == "..":
        raise MissingFileName(fleet_path)

    stem = PurePath(name).stem
    try:
        # os.fsdecode smuggles undecodable bytes in as lone surrogates.
        stem.encode("utf-8")
    except UnicodeEncodeError as e:
        raise NonUnicodeName(fleet_path) from e

    return stem
