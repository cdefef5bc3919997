"""Argument vector and environment for ``cargo zigbuild``.

zigbuild cross-links with zig, so the same command produces Lambda binaries from macOS,
Windows or Linux hosts. Swapping in plain ``cargo build`` or ``cross`` means revisiting
this module and the target normalization in build/target.py.
"""

from __future__ import annotations

import os
from typing import Any

from sls_rust_tooling.build.target import resolve_target
from sls_rust_tooling.config import is_release, resolve_option
from sls_rust_tooling.helpers import split_flags

CARGO = "cargo"
ZIGBUILD = "zigbuild"


def build_args(
    func_opts: dict[str, Any] | None,
    custom: dict[str, Any],
    cargo_package: str,
    profile: str | None,
) -> list[str]:
    """``zigbuild -p <pkg> [--release] [--target <t>] [cargoFlags...]`` (without the leading ``cargo``)."""
    default_args = [ZIGBUILD, "-p", cargo_package]
    profile_args = ["--release"] if is_release(profile) else []
    target = resolve_target(func_opts, custom)
    target_args = ["--target", target] if target else []
    cargo_flags = split_flags(resolve_option(func_opts, custom, "cargoFlags", ""))
    return [a for a in [*default_args, *profile_args, *target_args, *cargo_flags] if a]


def build_env(env: dict[str, str] | None = None) -> dict[str, str]:
    """Environment for the compiler: a copy of ``env`` (default: this process's environment)."""
    return dict(os.environ if env is None else env)
