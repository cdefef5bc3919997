"""Tests for sls_rust_tooling.cli (sls-rust build / hooks)."""

import sys
from io import StringIO
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

MANIFEST = """\
service: demo
provider:
  name: aws
  runtime: rust
functions:
  hello:
    handler: svc.handler
"""


class TestRunBuild:
    def test_builds_and_writes_manifest(self, tmp_path: Path, fake_binary, fake_toolchain) -> None:
        from sls_rust_tooling.cli.build import run_build

        config = tmp_path / "serverless.yml"
        config.write_text(MANIFEST)
        fake_binary("handler")
        with (
            patch("subprocess.run", side_effect=fake_toolchain()),
            patch("sys.stdout", new=StringIO()) as fake_out,
        ):
            rc = run_build(config, write=True)
        assert rc == 0
        expected = tmp_path.resolve() / "target" / "lambda" / "release" / "handler.zip"
        assert f"hello: {expected}" in fake_out.getvalue()

        data = yaml.safe_load(config.read_text())
        assert data["provider"]["runtime"] == "provided.al2"
        assert data["functions"]["hello"]["package"]["artifact"] == str(expected)
        assert data["package"]["excludeDevDependencies"] is False

    def test_without_write_leaves_manifest(self, tmp_path: Path, fake_binary, fake_toolchain) -> None:
        from sls_rust_tooling.cli.build import run_build

        config = tmp_path / "serverless.yml"
        config.write_text(MANIFEST)
        fake_binary("handler")
        with (
            patch("subprocess.run", side_effect=fake_toolchain()),
            patch("sys.stdout", new=StringIO()),
        ):
            assert run_build(config) == 0
        assert config.read_text() == MANIFEST

    def test_returns_1_on_build_error(self, tmp_path: Path, fake_toolchain) -> None:
        from sls_rust_tooling.cli.build import run_build

        config = tmp_path / "serverless.yml"
        config.write_text(MANIFEST)
        with (
            patch("subprocess.run", side_effect=fake_toolchain(build_rc=1)),
            patch("sys.stdout", new=StringIO()),
            patch("sys.stderr", new=StringIO()) as fake_err,
        ):
            assert run_build(config) == 1
        assert "❌" in fake_err.getvalue()
        assert "svc.handler" in fake_err.getvalue()

    def test_returns_1_when_manifest_missing(self, tmp_path: Path) -> None:
        from sls_rust_tooling.cli.build import run_build

        with patch("sys.stderr", new=StringIO()) as fake_err:
            assert run_build(tmp_path / "serverless.yml") == 1
        assert "Could not load" in fake_err.getvalue()

    def test_returns_1_when_manifest_not_mapping(self, tmp_path: Path) -> None:
        from sls_rust_tooling.cli.build import run_build

        config = tmp_path / "serverless.yml"
        config.write_text("- just\n- a list\n")
        with patch("sys.stderr", new=StringIO()):
            assert run_build(config) == 1


class TestArgv:
    def test_build_argv_passes_flags(self, tmp_path: Path) -> None:
        from sls_rust_tooling.cli import build as build_cli

        config = tmp_path / "serverless.yml"
        with patch.object(build_cli, "run_build", return_value=0) as m:
            with pytest.raises(SystemExit) as exc:
                build_cli.run_build_argv(["--config", str(config), "-f", "hello", "--write"])
        assert exc.value.code == 0
        m.assert_called_once_with(
            config, function="hello", service_path=None, host_version="", write=True
        )

    def test_hooks_argv(self) -> None:
        from sls_rust_tooling.cli.build import run_hooks_argv

        with patch("sys.stdout", new=StringIO()) as fake_out:
            with pytest.raises(SystemExit):
                run_hooks_argv(["--host-version", "1.39.0"])
        assert "before:invoke:local:invoke" in fake_out.getvalue().splitlines()

    def test_main_unknown_command(self) -> None:
        from sls_rust_tooling.cli.main import main

        with (
            patch.object(sys, "argv", ["sls-rust", "deploy"]),
            patch("sys.stderr", new=StringIO()) as fake_err,
        ):
            with pytest.raises(SystemExit) as exc:
                main()
        assert exc.value.code == 1
        assert "Unknown command" in fake_err.getvalue()

    def test_main_dispatches_build(self) -> None:
        from sls_rust_tooling.cli import build as build_cli
        from sls_rust_tooling.cli.main import main

        with (
            patch.object(sys, "argv", ["sls-rust", "build"]),
            patch.object(build_cli, "run_build_argv") as m,
        ):
            main()
        m.assert_called_once_with()
