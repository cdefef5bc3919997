"""Compile Rust functions with cargo zigbuild: target, command, run, locate output."""

from .command import build_args, build_env
from .executor import BuildOutcome, ensure_target_installed, execute
from .locate import cargo_target_directory, source_dir
from .target import normalize_target, resolve_target

__all__ = [
    "BuildOutcome",
    "build_args",
    "build_env",
    "cargo_target_directory",
    "ensure_target_installed",
    "execute",
    "normalize_target",
    "resolve_target",
    "source_dir",
]
