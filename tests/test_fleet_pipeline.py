import tempfile
import unittest
from pathlib import Path

from _fakes import FakeRunner, fake_cargo, wasm_opt_writes_output
from pipeline.models import BattleRequest, BuildRequest
from pipeline.pipeline import FleetPipeline
from pipeline.settings import Settings
from protologic_fleets.errors import BuildFailure, OutputDirMissing


class TestFleetPipelineBuild(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name)
        self.target = self.root / "target"
        self.release_dir = self.target / "wasm32-wasi" / "release"
        self.fleet_dir = self.target / "protologic_fleets"
        self.settings = Settings(fleet_dir=self.fleet_dir)

    def tearDown(self) -> None:
        self._td.cleanup()

    def _pipeline(self, runner: FakeRunner) -> FleetPipeline:
        return FleetPipeline(settings=self.settings, runner=runner, platform="linux", cwd=self.root)

    def test_build_compiles_then_optimizes_every_fleet(self) -> None:
        runner = FakeRunner(
            {
                "cargo": fake_cargo(
                    self.target,
                    default_members=["alpha", "beta"],
                    produces={
                        "alpha": self.release_dir / "alpha.wasm",
                        "beta": self.release_dir / "beta.wasm",
                    },
                ),
                "wasm-opt": wasm_opt_writes_output(),
            }
        )

        outcome = self._pipeline(runner).build(BuildRequest())

        self.assertEqual(["alpha", "beta"], outcome.packages)
        self.assertFalse(outcome.nothing_to_optimize)
        self.assertEqual(["alpha", "beta"], [f.fleet_name for f in outcome.fleets])
        self.assertEqual(["alpha.wasm", "beta.wasm"], sorted(p.name for p in self.fleet_dir.iterdir()))

        # metadata once, then one rustc per package, then one wasm-opt per artifact
        cargo_calls = runner.calls_to("cargo")
        self.assertEqual(1, sum(1 for c in cargo_calls if c[1] == "metadata"))
        self.assertEqual(["metadata", "rustc", "rustc"], [c[1] for c in cargo_calls])
        self.assertEqual(2, len(runner.calls_to("wasm-opt")))
        self.assertTrue(all("--asyncify" in c for c in runner.calls_to("wasm-opt")))

    def test_explicit_packages_override_default_members(self) -> None:
        runner = FakeRunner(
            {
                "cargo": fake_cargo(
                    self.target,
                    default_members=["alpha", "beta"],
                    produces={"beta": self.release_dir / "beta.wasm"},
                ),
                "wasm-opt": wasm_opt_writes_output(),
            }
        )

        outcome = self._pipeline(runner).build(BuildRequest(packages=["beta"]))

        self.assertEqual(["beta"], outcome.packages)
        self.assertEqual(["beta"], [f.fleet_name for f in outcome.fleets])

    def test_build_without_binaries_is_nothing_to_optimize(self) -> None:
        self.release_dir.mkdir(parents=True)
        runner = FakeRunner({"cargo": fake_cargo(self.target, default_members=["helper_lib"])})

        outcome = self._pipeline(runner).build(BuildRequest())

        self.assertTrue(outcome.nothing_to_optimize)
        self.assertEqual([], runner.calls_to("wasm-opt"))
        self.assertFalse(self.fleet_dir.exists())

    def test_missing_output_dir_is_an_error(self) -> None:
        runner = FakeRunner({"cargo": fake_cargo(self.target, default_members=["alpha"])})

        with self.assertRaises(OutputDirMissing):
            self._pipeline(runner).build(BuildRequest(debug=True))

    def test_build_failure_skips_optimization(self) -> None:
        runner = FakeRunner(
            {
                "cargo": fake_cargo(
                    self.target,
                    default_members=["alpha", "broken", "gamma"],
                    produces={"alpha": self.release_dir / "alpha.wasm"},
                    fail_package="broken",
                )
            }
        )

        with self.assertRaises(BuildFailure):
            self._pipeline(runner).build(BuildRequest())

        self.assertEqual([], runner.calls_to("wasm-opt"))
        rustc = [c[c.index("-p") + 1] for c in runner.calls_to("cargo") if c[1] == "rustc"]
        self.assertEqual(["alpha", "broken"], rustc)


class TestFleetPipelineListAndRun(unittest.TestCase):
    def test_list_then_battle_reads_the_same_registry(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            fleet_dir = root / "target" / "protologic_fleets"
            fleet_dir.mkdir(parents=True)
            (fleet_dir / "alpha.wasm").write_bytes(b"a")
            (fleet_dir / "beta.wasm").write_bytes(b"b")
            runner = FakeRunner()
            pipeline = FleetPipeline(
                settings=Settings(fleet_dir=fleet_dir),
                runner=runner,
                platform="windows",
                clock=lambda: 1000,
                cwd=root,
            )

            self.assertEqual(["alpha", "beta"], [f.fleet_name for f in pipeline.list_fleets()])

            outcome = pipeline.battle(BattleRequest(protologic_path=Path("C:/Protologic"), open_player=True))

            sim_cmd = runner.calls[0]
            self.assertEqual(Path("C:/Protologic") / "Sim/Windows/Protologic.Terminal.exe", Path(sim_cmd[0]))
            self.assertTrue(sim_cmd[-1].endswith("1000_alpha_beta"))
            self.assertEqual(str(root / "1000_alpha_beta.json.deflate"), runner.detached[0][1])
            self.assertEqual(outcome.replay_path, root / "1000_alpha_beta.json.deflate")


if __name__ == "__main__":
    unittest.main()
