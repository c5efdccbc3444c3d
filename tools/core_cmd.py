"""tools/core_cmd.py

Command-execution helpers shared across the external tool adapters.

This module deliberately avoids tool-specific knowledge. It provides:

* :func:`resolve_executable` - resolve executables reliably across environments.
* :func:`run_cmd` - run a subprocess (no shell=True) and wait for it.
* :func:`spawn_detached` - start a process and leave it running.
* :class:`SubprocessRunner` - the two above behind one object, so the
  pipeline can be handed a fake runner in tests.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from protologic_fleets.errors import ProcessSpawnError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    exit_code: int
    elapsed_seconds: float
    command_str: str
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def resolve_executable(bin_name: str, fallbacks: Optional[List[str]] = None) -> str:
    """Locate an executable and return its absolute path.

    Falls back to the bare *bin_name* when nothing is found, so the failure
    surfaces as a :class:`ProcessSpawnError` at the step that needs the tool
    rather than at startup.
    """
    found = shutil.which(bin_name)
    if found:
        return found

    for candidate in fallbacks or []:
        p = Path(candidate)
        if p.exists() and os.access(str(p), os.X_OK):
            return str(p)

    logger.debug("Executable %r not found on PATH; tried fallbacks %s", bin_name, fallbacks or [])
    return bin_name


def _command_str(cmd: Sequence[str]) -> str:
    return " ".join(str(c) for c in cmd)


def run_cmd(
    cmd: Sequence[str],
    *,
    cwd: Optional[Path] = None,
    env: Optional[Dict[str, str]] = None,
    capture: bool = False,
) -> CmdResult:
    """Run a subprocess and wait until it exits (no ``shell=True``).

    With ``capture=False`` the child inherits the terminal so long-running
    tools (cargo, the simulator) stream their progress. With ``capture=True``
    stdout/stderr are collected into the result instead.

    Never raises on non-zero exit codes; raises :class:`ProcessSpawnError`
    when the process cannot be started at all (e.g. binary not found).
    """
    argv: List[str] = [str(c) for c in cmd]
    command_str = _command_str(argv)
    logger.debug("Running: %s", command_str)

    # If env is provided, merge it onto the current process environment.
    env2 = None
    if env is not None:
        env2 = os.environ.copy()
        env2.update(env)

    t0 = time.time()
    try:
        proc = subprocess.run(
            argv,
            cwd=str(cwd) if cwd else None,
            env=env2,
            text=True,
            capture_output=capture,
        )
    except OSError as e:
        raise ProcessSpawnError(argv, e) from e
    elapsed = time.time() - t0

    if proc.returncode != 0:
        logger.warning("Command exited with %s after %.1fs: %s", proc.returncode, elapsed, command_str)

    return CmdResult(
        exit_code=proc.returncode,
        elapsed_seconds=elapsed,
        command_str=command_str,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
    )


def spawn_detached(cmd: Sequence[str], *, cwd: Optional[Path] = None) -> int:
    """Start a process that outlives this one; return its pid.

    The caller never waits on it and its exit status is never reported.
    """
    argv: List[str] = [str(c) for c in cmd]
    logger.debug("Spawning detached: %s", _command_str(argv))

    kwargs: Dict[str, object] = {}
    if sys.platform == "win32":
        kwargs["creationflags"] = subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
    else:
        kwargs["start_new_session"] = True

    try:
        proc = subprocess.Popen(
            argv,
            cwd=str(cwd) if cwd else None,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            **kwargs,
        )
    except OSError as e:
        raise ProcessSpawnError(argv, e) from e
    return proc.pid


class SubprocessRunner:
    """Real process runner used outside of tests."""

    def run(self, cmd: Sequence[str], *, cwd: Optional[Path] = None, capture: bool = False) -> CmdResult:
        return run_cmd(cmd, cwd=cwd, capture=capture)

    def spawn_detached(self, cmd: Sequence[str], *, cwd: Optional[Path] = None) -> int:
        return spawn_detached(cmd, cwd=cwd)
