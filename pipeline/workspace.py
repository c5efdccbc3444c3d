"""pipeline.workspace

Workspace resolution via ``cargo metadata``.

Every call spawns a fresh ``cargo metadata`` process; nothing is cached.
Orchestration code calls :func:`resolve_workspace` once per command and
passes the result along.

Fleets are the workspace ``default-members``: the intended workflow is to
make non-fleet packages (helpers, shared libraries) non-default members.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pipeline.models import WorkspaceInfo
from protologic_fleets.errors import MetadataParseError, MetadataUnavailable, ProcessSpawnError
from tools.cargo import metadata_command

logger = logging.getLogger(__name__)


def _stderr_tail(stderr: str, lines: int = 5) -> str:
    tail = [ln for ln in (stderr or "").strip().splitlines() if ln.strip()][-lines:]
    return " | ".join(tail)


def parse_metadata(stdout: str) -> WorkspaceInfo:
    """Extract default members and the target directory from metadata JSON."""
    try:
        data: Any = json.loads(stdout)
    except ValueError as e:
        raise MetadataParseError(f"not valid JSON ({e})") from e

    if not isinstance(data, dict):
        raise MetadataParseError("expected a JSON object at top level")

    members = data.get("workspace_default_members")
    if not isinstance(members, list) or not all(isinstance(m, str) for m in members):
        raise MetadataParseError("'workspace_default_members' must be a list of strings")

    target_dir = data.get("target_directory")
    if not isinstance(target_dir, str) or not target_dir:
        raise MetadataParseError("'target_directory' must be a non-empty string")

    return WorkspaceInfo(default_packages=list(members), output_root=Path(target_dir))


def resolve_workspace(runner, *, cargo_bin: str) -> WorkspaceInfo:
    """Query cargo once and return the parsed workspace facts."""
    cmd = metadata_command(cargo_bin)
    try:
        res = runner.run(cmd, capture=True)
    except ProcessSpawnError as e:
        raise MetadataUnavailable(str(e.cause)) from e

    if res.exit_code != 0:
        raise MetadataUnavailable(_stderr_tail(res.stderr) or "cargo metadata failed", exit_status=res.exit_code)

    info = parse_metadata(res.stdout)
    logger.debug("Metadata: %s", info)
    return info
