"""pipeline.settings

Runtime configuration.

Sources, highest precedence first:

1. CLI flags (passed in as ``overrides``)
2. environment variables (``.env`` is loaded into the environment by
   :mod:`pipeline.wiring` before this runs)
3. an optional ``protologic.yaml`` in the working directory (or ``--config``)
4. built-in defaults from :mod:`pipeline.core`

Example ``protologic.yaml``::

    protologic_path: C:/Games/Protologic/Release
    target_triple: wasm32-wasip1
    wasm_opt: /opt/binaryen/bin/wasm-opt
    asyncify_imports:
      - wasi_snapshot_preview1.sched_yield
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from pipeline.core import (
    CONFIG_FILENAME,
    DEFAULT_ASYNCIFY_IMPORTS,
    DEFAULT_CARGO,
    DEFAULT_WASM_OPT,
    FLEET_DIR,
    WASI_TARGET,
)
from protologic_fleets.errors import ConfigError

# YAML key -> environment variable
ENV_VARS: Dict[str, str] = {
    "protologic_path": "PROTOLOGIC_PATH",
    "target_triple": "PROTOLOGIC_TARGET",
    "wasm_opt": "PROTOLOGIC_WASM_OPT",
    "cargo": "PROTOLOGIC_CARGO",
    "fleet_dir": "PROTOLOGIC_FLEET_DIR",
}

CONFIG_KEYS = frozenset(ENV_VARS) | {"asyncify_imports"}


@dataclass(frozen=True)
class Settings:
    protologic_path: Optional[Path] = None
    target_triple: str = WASI_TARGET
    wasm_opt: str = DEFAULT_WASM_OPT
    cargo: str = DEFAULT_CARGO
    fleet_dir: Path = FLEET_DIR
    asyncify_imports: Tuple[str, ...] = DEFAULT_ASYNCIFY_IMPORTS
    config_path: Optional[Path] = None

    def require_protologic_path(self) -> Path:
        if self.protologic_path is None:
            raise ConfigError(
                "Missing the Protologic release path. Pass --protologic-path, set PROTOLOGIC_PATH "
                f"(shell or .env), or add protologic_path to {CONFIG_FILENAME}."
            )
        return self.protologic_path


def load_config_file(path: Path) -> Dict[str, Any]:
    """Read a YAML config mapping, validating its keys."""
    p = Path(path).expanduser()
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigError(f"Could not read config file {p}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {p}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must be a mapping/object at top level: {p}")

    unknown = sorted(str(k) for k in raw.keys() if k not in CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown keys in {p}: {unknown}. Valid: {sorted(CONFIG_KEYS)}")
    return raw


def _parse_imports(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        items = [x.strip() for x in value.split(",")]
    elif isinstance(value, (list, tuple)):
        items = [str(x).strip() for x in value]
    else:
        raise ConfigError(f"asyncify_imports must be a list or comma-separated string, got {value!r}")
    return tuple(x for x in items if x)


def _from_mapping(base: Settings, values: Mapping[str, Any]) -> Settings:
    changes: Dict[str, Any] = {}
    for key, value in values.items():
        if value is None or value == "":
            continue
        if key in ("protologic_path", "fleet_dir"):
            changes[key] = Path(str(value)).expanduser()
        elif key == "asyncify_imports":
            changes[key] = _parse_imports(value)
        else:
            changes[key] = str(value)
    return replace(base, **changes)


def load_settings(
    *,
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    cwd: Optional[Path] = None,
) -> Settings:
    """Merge defaults, config file, environment and CLI overrides."""
    env = os.environ if environ is None else environ
    settings = Settings()

    if config_path is None:
        candidate = (cwd or Path.cwd()) / CONFIG_FILENAME
        if candidate.is_file():
            config_path = candidate
    elif not Path(config_path).expanduser().is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    if config_path is not None:
        settings = _from_mapping(settings, load_config_file(config_path))
        settings = replace(settings, config_path=Path(config_path))

    from_env = {key: env.get(var) for key, var in ENV_VARS.items()}
    # Cargo exports CARGO when it runs an external subcommand.
    from_env["cargo"] = from_env["cargo"] or env.get("CARGO")
    settings = _from_mapping(settings, from_env)

    if overrides:
        settings = _from_mapping(settings, overrides)

    return settings
