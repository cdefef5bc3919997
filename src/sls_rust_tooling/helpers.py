"""Shared helpers for sls_rust_tooling (handler parsing, flag splitting, version compare)."""

from __future__ import annotations

import re

HANDLER_DELIMITER = "."


def split_handler(handler: str) -> tuple[str, str]:
    """Split ``package.binary`` into (cargo package, binary). Binary defaults to the package."""
    package, _, binary = handler.partition(HANDLER_DELIMITER)
    # "svc.bin.extra" keeps only "bin"
    binary = binary.split(HANDLER_DELIMITER)[0] if binary else ""
    return package, binary or package


def split_flags(flags: str | None) -> list[str]:
    """Whitespace-split extra cargo flags, dropping empty tokens."""
    return [f for f in re.split(r"\s+", flags or "") if f]


def _parse_version(v: str) -> tuple[int, int, int, str | None]:
    v = v.strip().lstrip("v")
    m = re.match(r"^(\d+)\.(\d+)(?:\.(\d+))?(?:-([\w.-]+))?$", v)
    if not m:
        msg = "Invalid version format: " + str(v)
        raise ValueError(msg)
    return (int(m.group(1)), int(m.group(2)), int(m.group(3) or 0), m.group(4))


def compare_versions(v1: str, v2: str) -> int:
    """Compare two version strings (semver, patch optional). Positive if v1 > v2, negative if v1 < v2, zero if equal. Raises ValueError on invalid format."""
    major1, minor1, patch1, prerelease1 = _parse_version(v1)
    major2, minor2, patch2, prerelease2 = _parse_version(v2)

    if major1 != major2:
        return major1 - major2
    if minor1 != minor2:
        return minor1 - minor2
    if patch1 != patch2:
        return patch1 - patch2

    if prerelease1 is None and prerelease2 is not None:
        return 1
    if prerelease1 is not None and prerelease2 is None:
        return -1
    if prerelease1 is None and prerelease2 is None:
        return 0

    if prerelease1 < prerelease2:
        return -1
    if prerelease1 > prerelease2:
        return 1
    return 0
