"""pipeline.wiring

This module is the **composition root** for the Python runtime.

"Composition root" means: the single place where we *assemble* the running
application from its building blocks:

- load ``.env`` into the environment
- configure logging
- merge configuration (flags, env, YAML)
- choose the real process runner (tests pass a fake one to FleetPipeline)
- build the high-level pipeline facade object
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from pipeline.core import DEFAULT_WASM_OPT, ENV_FILENAME
from pipeline.pipeline import FleetPipeline
from pipeline.settings import load_settings
from tools.core_cmd import SubprocessRunner, resolve_executable
from tools.wasm_opt import WASM_OPT_FALLBACKS

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def load_env_file(dotenv_path: Optional[Path] = None) -> bool:
    """Load KEY=VALUE pairs from ``.env``; already-exported variables win."""
    path = dotenv_path or (Path.cwd() / ENV_FILENAME)
    if not path.is_file():
        return False
    return load_dotenv(path, override=False)


def build_pipeline(
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    verbose: bool = False,
    load_env: bool = True,
) -> FleetPipeline:
    configure_logging(verbose)
    if load_env:
        load_env_file()

    settings = load_settings(config_path=config_path, overrides=overrides)
    if settings.wasm_opt == DEFAULT_WASM_OPT:
        settings = replace(settings, wasm_opt=resolve_executable(DEFAULT_WASM_OPT, WASM_OPT_FALLBACKS))

    logger.debug("Settings: %s", settings)
    return FleetPipeline(settings=settings, runner=SubprocessRunner())
