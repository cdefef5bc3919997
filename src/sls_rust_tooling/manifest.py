"""Read and write serverless.yml for the CLI. A build pass itself only sees the parsed dict."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

DEFAULT_MANIFEST = "serverless.yml"


def load_manifest(path: Path) -> dict[str, Any]:
    """Load a serverless manifest. Raises ValueError if it is not a mapping."""
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        msg = f"Manifest is not a mapping: {path}"
        raise ValueError(msg)
    return data


def dump_manifest(service: dict[str, Any], path: Path) -> None:
    with path.open("w") as f:
        yaml.safe_dump(service, f, sort_keys=False, default_flow_style=False)
