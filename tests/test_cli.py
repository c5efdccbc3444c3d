from __future__ import annotations

from pathlib import Path

import pytest

import cargo_protologic
from cargo_protologic import main, parse_args


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    for var in ("PROTOLOGIC_PATH", "PROTOLOGIC_FLEET_DIR", "PROTOLOGIC_TARGET", "PROTOLOGIC_WASM_OPT"):
        # setenv first so teardown also removes anything .env loading adds.
        monkeypatch.setenv(var, "unset")
        monkeypatch.delenv(var)
    return tmp_path


def test_cargo_subcommand_token_is_dropped() -> None:
    args = parse_args(["protologic", "build", "-p", "alpha", "--package", "beta", "-d"])
    assert args.command == "build"
    assert args.packages == ["alpha", "beta"]
    assert args.debug is True

    direct = parse_args(["build"])
    assert direct.packages is None
    assert direct.debug is False


def test_run_flags() -> None:
    args = parse_args(["protologic", "run", "--protologic-path", "/p", "-d", "-p"])
    assert args.command == "run"
    assert args.protologic_path == Path("/p")
    assert args.debug is True
    assert args.player is True


def test_missing_command_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as exc:
        parse_args(["protologic"])
    assert exc.value.code == 2


def test_list_with_no_fleets(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["protologic", "list"]) == 0
    assert "No fleets found" in capsys.readouterr().out


def test_list_prints_fleets_from_env_configured_dir(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    fleet_dir = workspace / "fleets"
    fleet_dir.mkdir()
    (fleet_dir / "alpha.wasm").write_bytes(b"a")
    (workspace / ".env").write_text(f"PROTOLOGIC_FLEET_DIR={fleet_dir}\n", encoding="utf-8")

    assert main(["list"]) == 0

    out = capsys.readouterr().out
    assert "Found fleet: alpha" in out


def test_run_without_protologic_path_exits_1(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["protologic", "run"]) == 1
    assert "PROTOLOGIC_PATH" in capsys.readouterr().err


def test_run_with_wrong_fleet_count_exits_1(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["protologic", "run", "--protologic-path", str(workspace)]) == 1
    assert "exactly two built fleets, found 0" in capsys.readouterr().err


def test_bad_config_file_exits_1(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workspace / "protologic.yaml").write_text("nonsense_key: 1\n", encoding="utf-8")
    assert main(["list"]) == 1
    assert "Unknown keys" in capsys.readouterr().err


def test_entrypoint_is_exposed() -> None:
    assert callable(cargo_protologic.main)
