"""Errors raised by a build pass. Every one of them aborts the whole pass."""

from __future__ import annotations


class RustPluginError(RuntimeError):
    """Base class for build pass failures."""


class NoRustFunctionsError(RustPluginError):
    """No function in scope uses the rust runtime."""


class ToolchainInstallError(RustPluginError):
    """``rustup target install`` could not be run or failed."""

    def __init__(
        self,
        msg: str,
        target: str,
        status: int | None = None,
        handler: str | None = None,
    ) -> None:
        super().__init__(msg)
        self.target = target
        self.status = status
        self.handler = handler


class MetadataError(RustPluginError):
    """``cargo metadata`` could not be run, failed, or returned unusable JSON."""

    def __init__(self, msg: str, handler: str | None = None) -> None:
        super().__init__(msg)
        self.handler = handler


class CompileError(RustPluginError):
    """The compiler could not be started or exited non-zero."""

    def __init__(
        self,
        msg: str,
        handler: str,
        status: int | None = None,
        cause: OSError | None = None,
    ) -> None:
        super().__init__(msg)
        self.handler = handler
        self.status = status
        self.cause = cause


class ArtifactError(RustPluginError):
    """Compiled binary missing where expected, or the archive could not be written."""

    def __init__(self, msg: str, handler: str | None = None) -> None:
        super().__init__(msg)
        self.handler = handler
