"""Run the Rust toolchain: ensure a rustup target, compile with live output."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import NamedTuple

from sls_rust_tooling.build.command import CARGO
from sls_rust_tooling.errors import ToolchainInstallError

log = logging.getLogger(__name__)

RUSTUP = "rustup"


class BuildOutcome(NamedTuple):
    """Result of a compiler run. ``ok`` is False when it could not start (``error``) or exited non-zero (``status``)."""

    ok: bool
    status: int | None = None
    error: OSError | None = None


def execute(
    args: list[str],
    env: dict[str, str] | None = None,
    cwd: Path | None = None,
) -> BuildOutcome:
    """Run ``cargo <args>``. stdin is /dev/null; stdout/stderr are inherited so output streams live. No retries."""
    cmd = [CARGO, *args]
    log.debug("Running %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        r = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            env=env,
            cwd=str(cwd) if cwd is not None else None,
        )
    except OSError as e:
        return BuildOutcome(ok=False, error=e)
    if r.returncode != 0:
        return BuildOutcome(ok=False, status=r.returncode)
    return BuildOutcome(ok=True, status=0)


def ensure_target_installed(target: str, handler: str | None = None) -> None:
    """``rustup target install <target>`` (idempotent). Raises ToolchainInstallError on failure.

    ``handler`` names the function the target is installed for in the error message.
    """
    cmd = [RUSTUP, "target", "install", target]
    suffix = f" (function {handler})" if handler else ""
    log.debug("Running %s", " ".join(cmd))
    try:
        r = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        msg = f"Could not run rustup to install target {target}{suffix}: {e}"
        raise ToolchainInstallError(msg, target, handler=handler) from e
    if r.returncode != 0:
        detail = (r.stderr or "").strip()
        msg = f"rustup target install {target} failed (exit {r.returncode}){suffix}"
        if detail:
            msg += f": {detail}"
        raise ToolchainInstallError(msg, target, status=r.returncode, handler=handler)
