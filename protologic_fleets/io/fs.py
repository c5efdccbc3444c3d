"""protologic_fleets.io.fs

Atomic artifact writes.

The fleet-output directory is read as the registry of built fleets, so a
half-written binary under a fleet's final name would silently corrupt the
next battle. Writers produce into a hidden temp file in the same directory
and ``os.replace()`` it into place only once it is complete.
"""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


@contextmanager
def atomic_output_path(path: Path) -> Iterator[Path]:
    """Yield a temp path next to *path*; promote it on a clean exit.

    If the body raises, the temp file is removed and *path* (including any
    previous version of it) is left untouched.
    """

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=str(p.parent))
    os.close(fd)
    tmp_path = Path(tmp_name)

    try:
        yield tmp_path
        os.replace(tmp_path, p)
    finally:
        # If the body or os.replace failed, best-effort cleanup of the temp file.
        try:
            if tmp_path.exists():
                tmp_path.unlink()
        except OSError:
            pass
