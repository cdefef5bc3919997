"""Build every rust function in a service and point it at its zipped binary.

One pass is strictly sequential. The first failure (rustup, compile, missing binary,
zip write) raises and leaves the remaining functions untouched; functions already
built keep their rewritten artifact/runtime.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Callable
from pathlib import Path
from typing import Any

from sls_rust_tooling.build import (
    build_args,
    build_env,
    cargo_target_directory,
    ensure_target_installed,
    execute,
    normalize_target,
    resolve_target,
    source_dir,
)
from sls_rust_tooling.config import (
    BASE_RUNTIME,
    RUST_RUNTIME,
    resolve_custom,
    resolve_profile,
    source_root,
)
from sls_rust_tooling.errors import CompileError, NoRustFunctionsError, RustPluginError
from sls_rust_tooling.helpers import split_handler
from sls_rust_tooling.package import package_binary

log = logging.getLogger(__name__)

AWS_PROVIDER = "aws"


def function_names(service: dict[str, Any], options: dict[str, Any] | None = None) -> list[str]:
    """``options["function"]`` alone if given, else every function in manifest order."""
    name = (options or {}).get("function")
    if name:
        return [name]
    return list((service.get("functions") or {}).keys())


def _get_function(service: dict[str, Any], name: str) -> dict[str, Any]:
    func = (service.get("functions") or {}).get(name)
    if func is None:
        msg = f"Function '{name}' is not defined in the service"
        raise RustPluginError(msg)
    return func


def _compile(
    func: dict[str, Any],
    custom: dict[str, Any],
    cargo_package: str,
    profile: str | None,
    root: Path,
    echo: Callable[[str], None],
) -> None:
    func_opts = func.get("rust")
    args = build_args(func_opts, custom, cargo_package, profile)
    echo(f"🔨 Running local cargo build on {platform.system()} with args: {' '.join(args)}")
    outcome = execute(args, build_env(), cwd=root)
    if outcome.ok:
        return
    handler = func.get("handler", "")
    if outcome.error is not None:
        msg = f"Rust build of {handler} could not start: {outcome.error}"
        raise CompileError(msg, handler, cause=outcome.error) from outcome.error
    msg = f"Rust build of {handler} failed (exit {outcome.status})"
    raise CompileError(msg, handler, status=outcome.status)


def build_functions(
    service: dict[str, Any],
    options: dict[str, Any] | None = None,
    service_path: str | Path | None = None,
    echo: Callable[[str], None] = print,
) -> list[str]:
    """Run one build pass over ``service`` (a parsed serverless manifest), mutating it in place.

    Returns the names of the functions that were built. Raises NoRustFunctionsError
    when nothing in scope uses the rust runtime, and any other RustPluginError from the
    first function that fails.
    """
    provider = service.get("provider") or {}
    if provider.get("name") != AWS_PROVIDER:
        log.debug("Provider %r is not aws; nothing to build", provider.get("name"))
        return []

    custom = resolve_custom(service)
    root = source_root(custom, service_path)
    built: list[str] = []
    rust_functions_found = False
    # cargo metadata is queried once and reused for every function in this pass
    target_directory: Path | None = None

    for name in function_names(service, options):
        func = _get_function(service, name)
        runtime = func.get("runtime") or provider.get("runtime")
        if runtime != RUST_RUNTIME:
            continue
        rust_functions_found = True
        handler = func.get("handler") or name
        cargo_package, binary = split_handler(handler)
        func_opts = func.get("rust")

        target = resolve_target(func_opts, custom)
        triple = normalize_target(target)
        if triple:
            echo(f"🔧 Making sure Rust target {triple} is installed")
            ensure_target_installed(triple, handler)

        echo(f"🔨 Building Rust {handler} func...")
        profile = resolve_profile(func_opts, custom)
        _compile(func, custom, cargo_package, profile, root, echo)

        if target_directory is None:
            target_directory = cargo_target_directory(root, handler)
        binary_path = source_dir(target_directory, target, profile) / binary
        echo(f"📦 Binary at {binary_path}")
        artifact = package_binary(binary_path, root, profile, binary, handler)
        echo(f"📦 Artifacts at {artifact.parent}")

        func["package"] = func.get("package") or {}
        func["package"]["artifact"] = str(artifact)
        if func.get("runtime") == RUST_RUNTIME:
            func["runtime"] = BASE_RUNTIME
        built.append(name)

    if provider.get("runtime") == RUST_RUNTIME:
        provider["runtime"] = BASE_RUNTIME
    if not rust_functions_found:
        msg = (
            "Error: no Rust functions found. "
            f"Use 'runtime: {RUST_RUNTIME}' in global or "
            "function configuration to use this plugin."
        )
        raise NoRustFunctionsError(msg)
    echo(f"✅ Built {len(built)} Rust function(s)")
    return built
