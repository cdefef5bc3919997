"""Locate cargo's output directory for a build."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path

from sls_rust_tooling.build.command import CARGO
from sls_rust_tooling.build.target import normalize_target
from sls_rust_tooling.config import profile_dir
from sls_rust_tooling.errors import MetadataError

log = logging.getLogger(__name__)

METADATA_ARGS = ["metadata", "--format-version", "1", "--no-deps"]


def cargo_target_directory(cwd: Path | None = None, handler: str | None = None) -> Path:
    """``target_directory`` from ``cargo metadata``. Raises MetadataError naming ``handler`` if given."""
    cmd = [CARGO, *METADATA_ARGS]
    suffix = f" (function {handler})" if handler else ""
    log.debug("Running %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        r = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=str(cwd) if cwd is not None else None,
        )
    except OSError as e:
        msg = f"Could not run cargo metadata{suffix}: {e}"
        raise MetadataError(msg, handler) from e
    if r.returncode != 0:
        msg = f"cargo metadata failed (exit {r.returncode}){suffix}: {(r.stderr or '').strip()}"
        raise MetadataError(msg, handler)
    try:
        data = json.loads(r.stdout)
        return Path(data["target_directory"])
    except (json.JSONDecodeError, KeyError, TypeError) as e:
        msg = f"cargo metadata returned no target_directory{suffix}: {e}"
        raise MetadataError(msg, handler) from e


def source_dir(target_directory: Path, target: str | None, profile: str | None) -> Path:
    """``<target_directory>/[<triple>/]<release|debug>``. The triple is stripped of any zig glibc suffix."""
    out = target_directory
    triple = normalize_target(target)
    if triple:
        out = out / triple
    return out / profile_dir(profile)
