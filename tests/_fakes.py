"""Recording stand-in for tools.core_cmd.SubprocessRunner."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from tools.core_cmd import CmdResult

Handler = Callable[[List[str]], CmdResult]


def ok(cmd: Sequence[str], stdout: str = "", stderr: str = "") -> CmdResult:
    return CmdResult(exit_code=0, elapsed_seconds=0.0, command_str=" ".join(cmd), stdout=stdout, stderr=stderr)


def failed(cmd: Sequence[str], code: int = 1, stderr: str = "boom") -> CmdResult:
    return CmdResult(exit_code=code, elapsed_seconds=0.0, command_str=" ".join(cmd), stderr=stderr)


class FakeRunner:
    """Records every command; answers with per-executable handlers.

    Handlers are keyed by the executable's file name (``cargo``,
    ``wasm-opt``, ``Protologic.Terminal``). Unknown executables succeed.
    """

    def __init__(self, handlers: Optional[Dict[str, Handler]] = None) -> None:
        self.handlers: Dict[str, Handler] = dict(handlers or {})
        self.calls: List[List[str]] = []
        self.detached: List[List[str]] = []

    def run(self, cmd: Sequence[str], *, cwd: Optional[Path] = None, capture: bool = False) -> CmdResult:
        argv = [str(c) for c in cmd]
        self.calls.append(argv)
        handler = self.handlers.get(Path(argv[0]).name)
        if handler is None:
            return ok(argv)
        return handler(argv)

    def spawn_detached(self, cmd: Sequence[str], *, cwd: Optional[Path] = None) -> int:
        self.detached.append([str(c) for c in cmd])
        return 4242

    def calls_to(self, exe_name: str) -> List[List[str]]:
        return [c for c in self.calls if Path(c[0]).name == exe_name]


def wasm_opt_writes_output(payload: bytes = b"\x00asm\x01\x00\x00\x00optimized") -> Handler:
    """wasm-opt stand-in: writes *payload* to the ``-o`` path."""

    def _handler(cmd: List[str]) -> CmdResult:
        out = Path(cmd[cmd.index("-o") + 1])
        out.write_bytes(payload)
        return ok(cmd)

    return _handler


def fake_cargo(
    target_directory: Path,
    *,
    default_members: Sequence[str] = (),
    produces: Optional[Dict[str, Path]] = None,
    fail_package: Optional[str] = None,
) -> Handler:
    """cargo stand-in answering ``metadata`` and ``rustc``.

    ``produces`` maps package name -> wasm file the build should drop.
    """

    metadata = {
        "packages": [],
        "workspace_default_members": list(default_members),
        "target_directory": str(target_directory),
        "version": 1,
    }

    def _handler(cmd: List[str]) -> CmdResult:
        if cmd[1] == "metadata":
            return ok(cmd, stdout=json.dumps(metadata))
        if cmd[1] == "rustc":
            package = cmd[cmd.index("-p") + 1]
            if package == fail_package:
                return failed(cmd, code=101, stderr="error[E0425]: cannot find value")
            out = (produces or {}).get(package)
            if out is not None:
                out.parent.mkdir(parents=True, exist_ok=True)
                out.write_bytes(b"\x00asm\x01\x00\x00\x00" + b"\x00" * 2048)
            return ok(cmd)
        return failed(cmd, stderr=f"unexpected cargo call: {cmd}")

    return _handler
