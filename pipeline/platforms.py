"""pipeline.platforms

Where the Protologic release keeps its simulator and player binaries.

The platform is detected once at startup. Unsupported combinations (the
player has no Linux build) raise :class:`UnsupportedPlatform` only when that
binary is actually requested, so ``build``/``list`` keep working everywhere.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, Literal, Optional

from protologic_fleets.errors import UnsupportedPlatform

PlatformKind = Literal["windows", "linux", "macos", "other"]

_SIMULATOR_PATHS: Dict[str, str] = {
    "windows": "Sim/Windows/Protologic.Terminal.exe",
    "linux": "Sim/Linux/Protologic.Terminal",
}

_PLAYER_PATHS: Dict[str, str] = {
    "windows": "Player/Windows/PROTOLOGIC.exe",
}

_PLATFORM_LABELS: Dict[str, str] = {
    "windows": "Windows",
    "linux": "Linux",
    "macos": "macOS",
    "other": "this platform",
}


def detect_platform(platform: Optional[str] = None) -> PlatformKind:
    p = sys.platform if platform is None else platform
    if p.startswith("win") or p == "cygwin":
        return "windows"
    if p.startswith("linux"):
        return "linux"
    if p == "darwin":
        return "macos"
    return "other"


def simulator_path(protologic_path: Path, platform: PlatformKind) -> Path:
    rel = _SIMULATOR_PATHS.get(platform)
    if rel is None:
        raise UnsupportedPlatform("sim", _PLATFORM_LABELS[platform])
    return Path(protologic_path) / rel


def player_path(protologic_path: Path, platform: PlatformKind) -> Path:
    rel = _PLAYER_PATHS.get(platform)
    if rel is None:
        raise UnsupportedPlatform("player", _PLATFORM_LABELS[platform])
    return Path(protologic_path) / rel
