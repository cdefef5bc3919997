"""Serverless plugin surface: build pass over a service plus lifecycle hooks."""

from .hooks import HOOK_TABLE, RustPlugin, hooks_for_version
from .orchestrator import build_functions, function_names

__all__ = [
    "HOOK_TABLE",
    "RustPlugin",
    "build_functions",
    "function_names",
    "hooks_for_version",
]
