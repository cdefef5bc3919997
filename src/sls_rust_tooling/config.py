"""Plugin configuration: runtime tags, profile naming and option precedence.

Global options come from the manifest's ``custom.rust`` mapping; per-function options
from each function's ``rust`` mapping. A per-function value always wins over the global
one, which wins over the built-in default.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

RUST_RUNTIME = "rust"
BASE_RUNTIME = "provided.al2"

# Lambda's provided runtime executes the file with this exact name from the archive.
BOOTSTRAP_NAME = "bootstrap"

DEV_PROFILE = "dev"
ARTIFACT_ROOT = Path("target") / "lambda"

DEFAULT_CUSTOM: dict[str, Any] = {
    "cargoFlags": "",
    "target": None,
    "profile": None,
    "dockerPath": None,
}


def resolve_custom(service: dict[str, Any]) -> dict[str, Any]:
    """Return ``custom.rust`` with defaults filled. Unknown keys are dropped."""
    custom = (service.get("custom") or {}).get("rust") or {}
    out = dict(DEFAULT_CUSTOM)
    out.update({k: v for k, v in custom.items() if k in out})
    return out


def resolve_option(
    func_opts: dict[str, Any] | None,
    custom: dict[str, Any],
    key: str,
    default: Any = None,
) -> Any:
    """Function option, else global option, else default. Empty values fall through."""
    value = (func_opts or {}).get(key)
    if value:
        return value
    value = custom.get(key)
    if value:
        return value
    return default


def resolve_profile(func_opts: dict[str, Any] | None, custom: dict[str, Any]) -> str | None:
    return resolve_option(func_opts, custom, "profile")


def is_release(profile: str | None) -> bool:
    """Anything but the dev profile (including no profile at all) is a release build."""
    return profile != DEV_PROFILE


def profile_dir(profile: str | None) -> str:
    return "release" if is_release(profile) else "debug"


def source_root(custom: dict[str, Any], service_path: str | Path | None) -> Path:
    """Root the build runs in. ``dockerPath`` overrides the service path (e.g. a workspace root)."""
    return Path(custom.get("dockerPath") or service_path or "").resolve()
