"""Target resolution for cargo zigbuild.

zigbuild accepts a glibc version suffix on the triple (``aarch64-unknown-linux-gnu.2.17``).
cargo and rustup do not know it: the suffix is passed to zigbuild verbatim but stripped
whenever the triple addresses ``target/<triple>/`` or a rustup target.
"""

from __future__ import annotations

from typing import Any

from sls_rust_tooling.config import resolve_option

TARGET_VERSION_DELIMITER = "."


def resolve_target(func_opts: dict[str, Any] | None, custom: dict[str, Any]) -> str | None:
    """Function target, else ``custom.rust.target``, else None (host-native build)."""
    return resolve_option(func_opts, custom, "target")


def normalize_target(target: str | None) -> str | None:
    """Strip the zig glibc version: ``aarch64-unknown-linux-gnu.2.17`` -> ``aarch64-unknown-linux-gnu``."""
    if not target:
        return None
    return target.split(TARGET_VERSION_DELIMITER)[0]
