"""Main CLI entry point for sls-rust."""

import sys

from sls_rust_tooling.cli import build as build_cli


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: sls-rust <command> [args...]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print(
            "  build [--config F] [--function N]  - Build Rust functions and rewrite artifacts",
            file=sys.stderr,
        )
        print(
            "  hooks [--host-version V]           - List lifecycle hooks for a serverless version",
            file=sys.stderr,
        )
        sys.exit(1)

    command = sys.argv[1]

    if command == "build":
        build_cli.run_build_argv()
    elif command == "hooks":
        build_cli.run_hooks_argv()
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
