"""Serverless lifecycle hooks and the plugin object the host drives.

Which hooks exist depends on the host version, so the set is a table evaluated once
when the plugin is constructed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from sls_rust_tooling.helpers import compare_versions
from sls_rust_tooling.plugin.orchestrator import build_functions

log = logging.getLogger(__name__)

# (min version inclusive, max version exclusive, hook); None means unbounded.
HOOK_TABLE: list[tuple[str | None, str | None, str]] = [
    (None, None, "before:package:createDeploymentArtifacts"),
    (None, None, "before:deploy:function:packageFunction"),
    (None, None, "before:offline:start"),
    (None, None, "before:offline:start:init"),
    ("1.38", "1.40", "before:invoke:local:invoke"),
]


def _in_range(version: str, low: str | None, high: str | None) -> bool:
    if low is None and high is None:
        return True
    try:
        if low is not None and compare_versions(version, low) < 0:
            return False
        return not (high is not None and compare_versions(version, high) >= 0)
    except ValueError:
        log.debug("Unparseable host version %r; skipping version-bound hooks", version)
        return False


def hooks_for_version(host_version: str) -> list[str]:
    """Hook names to register for a serverless host of ``host_version``, in table order."""
    return [hook for low, high, hook in HOOK_TABLE if _in_range(host_version, low, high)]


class RustPlugin:
    """Build trigger: ``build()`` runs one pass; ``hooks`` maps lifecycle events to it."""

    def __init__(
        self,
        service: dict[str, Any],
        options: dict[str, Any] | None = None,
        host_version: str = "",
        service_path: str | Path | None = None,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.service = service
        self.options = options or {}
        self.service_path = service_path or ""
        self.echo = echo
        self.hooks: dict[str, Callable[[], list[str]]] = {
            hook: self.build for hook in hooks_for_version(host_version)
        }
        # node_modules only holds serverless and plugins; skip the dev-dependency scan
        package = service.get("package") or {}
        package["excludeDevDependencies"] = False
        service["package"] = package

    def build(self) -> list[str]:
        """Entry point for every registered hook."""
        return build_functions(
            self.service,
            options=self.options,
            service_path=self.service_path,
            echo=self.echo,
        )
