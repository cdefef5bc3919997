"""Lambda artifact packaging."""

from .archive import artifact_dir, artifact_path, package_binary

__all__ = [
    "artifact_dir",
    "artifact_path",
    "package_binary",
]
