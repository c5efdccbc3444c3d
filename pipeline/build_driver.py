"""pipeline.build_driver

Sequential per-package wasm builds.

Packages are built one at a time: every ``cargo rustc`` invocation shares the
same target directory and compilation cache, so overlapping runs would race
on the output. The first failing package stops the loop; there are no
retries, a failed build is a compile error for the developer to fix.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from protologic_fleets.errors import BuildFailure, EmptyBuildError
from tools.cargo import rustc_command

logger = logging.getLogger(__name__)


def select_packages(requested: Optional[Iterable[str]], default_members: Iterable[str]) -> List[str]:
    """Explicit packages win over the workspace defaults; duplicates dropped."""
    source = list(requested) if requested else list(default_members)
    packages: List[str] = []
    for pkg in source:
        pkg = str(pkg).strip()
        if pkg and pkg not in packages:
            packages.append(pkg)
    if not packages:
        raise EmptyBuildError()
    return packages


def build_packages(
    packages: Iterable[str],
    *,
    debug: bool,
    runner,
    cargo_bin: str,
    target: str,
) -> List[str]:
    """Build each package to wasm, in order. Returns the packages built."""
    built: List[str] = []
    for package in packages:
        print(f"🔨 Building {package} ({'debug' if debug else 'release'}, {target})")
        res = runner.run(rustc_command(cargo_bin, package, target=target, debug=debug))
        if res.exit_code != 0:
            logger.warning("Build of %s failed; skipping remaining packages", package)
            raise BuildFailure(package, res.exit_code)
        built.append(package)
    return built
