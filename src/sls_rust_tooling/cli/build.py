"""`sls-rust build` and `sls-rust hooks`."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from sls_rust_tooling.errors import RustPluginError
from sls_rust_tooling.manifest import DEFAULT_MANIFEST, dump_manifest, load_manifest
from sls_rust_tooling.plugin import RustPlugin, hooks_for_version


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run_build(
    config: Path,
    function: str | None = None,
    service_path: Path | None = None,
    host_version: str = "",
    write: bool = False,
) -> int:
    """Load ``config``, run one build pass, optionally write the patched manifest back. Returns 0 or 1."""
    try:
        service = load_manifest(config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"❌ Could not load {config}: {e}", file=sys.stderr)
        return 1

    options = {"function": function} if function else {}
    plugin = RustPlugin(
        service,
        options,
        host_version=host_version,
        service_path=service_path or config.resolve().parent,
    )
    try:
        built = plugin.build()
    except RustPluginError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    functions = service.get("functions") or {}
    for name in built:
        print(f"{name}: {functions[name]['package']['artifact']}")
    if write:
        try:
            dump_manifest(service, config)
        except OSError as e:
            print(f"❌ Could not write {config}: {e}", file=sys.stderr)
            return 1
        print(f"✅ Updated {config}")
    return 0


def run_build_argv(argv: list[str] | None = None) -> None:
    """Parse argv and run a build pass (--config, --function, --service-path, --write)."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []  # skip 'sls-rust build'
    ap = argparse.ArgumentParser(description="Build Rust functions with cargo zigbuild")
    ap.add_argument(
        "--config",
        type=Path,
        default=Path(DEFAULT_MANIFEST),
        help=f"Serverless manifest (default: {DEFAULT_MANIFEST})",
    )
    ap.add_argument("--function", "-f", default=None, help="Build only this function")
    ap.add_argument(
        "--service-path",
        type=Path,
        default=None,
        help="Service directory (default: directory of --config)",
    )
    ap.add_argument("--host-version", default="", help="Serverless version of the host")
    ap.add_argument("--write", action="store_true", help="Write the patched manifest back")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)
    _configure_logging(args.verbose)
    rc = run_build(
        args.config,
        function=args.function,
        service_path=args.service_path,
        host_version=args.host_version,
        write=args.write,
    )
    sys.exit(rc)


def run_hooks_argv(argv: list[str] | None = None) -> None:
    """Print the lifecycle hooks registered for --host-version."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    ap = argparse.ArgumentParser(description="List lifecycle hooks for a serverless version")
    ap.add_argument("--host-version", default="", help="Serverless version of the host")
    args = ap.parse_args(argv)
    for hook in hooks_for_version(args.host_version):
        print(hook)
    sys.exit(0)
