"""protologic_fleets.errors

Error taxonomy shared by every command.

Each exception carries the context needed to act on a single printed message
(package or fleet name, path, exit status). The CLI entrypoint is the only
place that catches :class:`ProtologicError`; everything else lets it
propagate so the current command stops at the first failure.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class ProtologicError(Exception):
    """Base class for every failure reported by the tool."""


# ---------------------------------------------------------------------------
# Configuration / resolution
# ---------------------------------------------------------------------------


class ConfigError(ProtologicError):
    """Invalid or missing configuration (flags, env, config file)."""


class UnsupportedPlatform(ConfigError):
    def __init__(self, component: str, platform: str) -> None:
        self.component = component
        self.platform = platform
        super().__init__(f"Protologic {component} doesn't support {platform}!")


class MetadataUnavailable(ProtologicError):
    def __init__(self, reason: str, *, exit_status: Optional[int] = None) -> None:
        self.reason = reason
        self.exit_status = exit_status
        msg = f"Could not query workspace metadata: {reason}"
        if exit_status is not None:
            msg += f" (exit status {exit_status})"
        super().__init__(msg)


class MetadataParseError(ProtologicError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not parse `cargo metadata` output: {reason}")


# ---------------------------------------------------------------------------
# Build / discovery
# ---------------------------------------------------------------------------


class EmptyBuildError(ProtologicError):
    def __init__(self) -> None:
        super().__init__(
            "No packages to build. Pass --package or add fleets to the workspace default-members."
        )


class BuildFailure(ProtologicError):
    def __init__(self, package: str, exit_status: int) -> None:
        self.package = package
        self.exit_status = exit_status
        super().__init__(f"Building package '{package}' failed with exit status {exit_status}")


class OutputDirMissing(ProtologicError):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(
            f"Can't find wasm output from build: {self.path} does not exist. "
            "Is the wasm target installed (rustup target add ...)?"
        )


class FleetNameError(ProtologicError):
    """A fleet identifier could not be derived from an artifact path."""

    def __init__(self, path: object, message: str) -> None:
        self.path = path
        super().__init__(f"{message}: {path!r}")


class MissingFileName(FleetNameError):
    def __init__(self, path: object) -> None:
        super().__init__(path, "fleet name wouldn't be found in fleet path")


class NonUnicodeName(FleetNameError):
    def __init__(self, path: object) -> None:
        super().__init__(path, "you need to name your fleet valid unicode")


# ---------------------------------------------------------------------------
# Optimization
# ---------------------------------------------------------------------------


class OptimizeFailure(ProtologicError):
    def __init__(self, fleet_name: str, cause: str) -> None:
        self.fleet_name = fleet_name
        self.cause = cause
        super().__init__(f"Error optimizing wasm binary for fleet '{fleet_name}': {cause}")


# ---------------------------------------------------------------------------
# Battles / external processes
# ---------------------------------------------------------------------------


class WrongFleetCount(ProtologicError):
    def __init__(self, found: int, fleet_dir: Path) -> None:
        self.found = found
        self.fleet_dir = Path(fleet_dir)
        super().__init__(
            f"A battle needs exactly two built fleets, found {found} in {self.fleet_dir}"
        )


class ProcessSpawnError(ProtologicError):
    def __init__(self, command: Sequence[str], cause: BaseException | str) -> None:
        self.command = list(command)
        self.cause = cause
        exe = self.command[0] if self.command else "<empty command>"
        super().__init__(f"Failed to start '{exe}': {cause}")


class SimulatorFailure(ProtologicError):
    def __init__(self, exit_status: int, output_path: Path) -> None:
        self.exit_status = exit_status
        self.output_path = Path(output_path)
        super().__init__(
            f"Protologic sim exited with status {exit_status} (output: {self.output_path})"
        )
