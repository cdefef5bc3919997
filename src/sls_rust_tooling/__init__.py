"""Build Rust functions for AWS Lambda with cargo zigbuild and package them for the provided runtime."""

from .errors import (
    ArtifactError,
    CompileError,
    MetadataError,
    NoRustFunctionsError,
    RustPluginError,
    ToolchainInstallError,
)
from .plugin import RustPlugin, build_functions, hooks_for_version

__all__ = [
    "ArtifactError",
    "CompileError",
    "MetadataError",
    "NoRustFunctionsError",
    "RustPlugin",
    "RustPluginError",
    "ToolchainInstallError",
    "build_functions",
    "hooks_for_version",
]
