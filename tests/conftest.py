"""Pytest fixtures for sls_rust_tooling tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def rust_service() -> dict[str, Any]:
    """Minimal parsed serverless manifest with one rust function (handler svc.handler)."""
    return {
        "service": "demo",
        "provider": {"name": "aws", "runtime": "rust"},
        "functions": {
            "hello": {"handler": "svc.handler"},
        },
    }


@pytest.fixture
def fake_binary(tmp_path: Path) -> Callable[..., Path]:
    """Create a fake compiled binary under tmp_path/target[/<triple>]/<release|debug>/<name>."""

    def _make(name: str, triple: str | None = None, profile_dir: str = "release") -> Path:
        d = tmp_path.resolve() / "target"
        if triple:
            d = d / triple
        d = d / profile_dir
        d.mkdir(parents=True, exist_ok=True)
        p = d / name
        p.write_bytes(b"\x7fELF fake " + name.encode())
        return p

    return _make


@pytest.fixture
def fake_toolchain(tmp_path: Path) -> Callable[..., Any]:
    """subprocess.run side effect for rustup/cargo. Records every command in .calls."""

    def _make(build_rc: int = 0, rustup_rc: int = 0, metadata_rc: int = 0) -> Any:
        calls: list[list[str]] = []

        def _run(cmd: list[str], *args: Any, **kwargs: Any) -> MagicMock:
            calls.append(list(cmd))
            if cmd[0] == "rustup":
                return MagicMock(returncode=rustup_rc, stdout="", stderr="no such target")
            if cmd[1] == "metadata":
                out = json.dumps({"target_directory": str(tmp_path.resolve() / "target")})
                return MagicMock(returncode=metadata_rc, stdout=out, stderr="no Cargo.toml")
            return MagicMock(returncode=build_rc)

        _run.calls = calls  # type: ignore[attr-defined]
        return _run

    return _make
