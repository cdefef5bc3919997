"""Zip a compiled binary as ``bootstrap`` for Lambda's provided runtime."""

from __future__ import annotations

import zipfile
from pathlib import Path

from sls_rust_tooling.config import ARTIFACT_ROOT, BOOTSTRAP_NAME, profile_dir
from sls_rust_tooling.errors import ArtifactError

# Fixed entry timestamp so identical binaries give identical archives.
ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)
BOOTSTRAP_MODE = 0o755


def artifact_dir(root: Path, profile: str | None) -> Path:
    """``<root>/target/lambda/<release|debug>``."""
    return root / ARTIFACT_ROOT / profile_dir(profile)


def artifact_path(root: Path, profile: str | None, binary: str) -> Path:
    return artifact_dir(root, profile) / f"{binary}.zip"


def package_binary(
    binary_path: Path,
    root: Path,
    profile: str | None,
    binary: str,
    handler: str | None = None,
) -> Path:
    """Write ``binary_path`` into ``<root>/target/lambda/<profile>/<binary>.zip`` as ``bootstrap``.

    Creates the output directory. Raises ArtifactError if the binary is missing or the
    archive cannot be written.
    """
    if not binary_path.is_file():
        msg = f"Binary not found: {binary_path}"
        if handler:
            msg += f" (function {handler})"
        raise ArtifactError(msg, handler)

    out = artifact_path(root, profile, binary)
    info = zipfile.ZipInfo(BOOTSTRAP_NAME, date_time=ZIP_DATE_TIME)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.create_system = 3  # unix, so external_attr is honoured
    info.external_attr = (0o100000 | BOOTSTRAP_MODE) << 16
    # written beside the artifact and renamed over it, so a failed write keeps the old zip
    tmp = out.with_name(out.name + ".tmp")
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        data = binary_path.read_bytes()
        with zipfile.ZipFile(tmp, "w") as zh:
            zh.writestr(info, data)
        tmp.replace(out)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        msg = f"Error zipping artifact {out}: {e}"
        if handler:
            msg += f" (function {handler})"
        raise ArtifactError(msg, handler) from e
    return out
