"""
metadata.py

Responsibility: Read the package descriptor (`package.yaml`) that ships next to this module.

Only a handful of fields are used; the version is exposed as `makekit.__version__`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from makekit.registry import PACKAGE_ROOT


class MetadataError(RuntimeError):
    pass


DEFAULT_METADATA_PATH = Path(PACKAGE_ROOT) / "package.yaml"


@dataclass(frozen=True)
class PackageMetadata:
    name: str
    version: str
    description: str = ""


def load_metadata(path: str | Path | None = None) -> PackageMetadata:
    """
    Load and validate the package descriptor.

    `version` is required; `name` and `description` fall back to empty-ish defaults.
    """
    meta_path = Path(path) if path is not None else DEFAULT_METADATA_PATH
    if not meta_path.exists():
        raise MetadataError(f"Package descriptor does not exist: {meta_path}")

    try:
        data = yaml.safe_load(meta_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise MetadataError(f"Package descriptor is not valid YAML: {meta_path}") from e
    if not isinstance(data, dict):
        raise MetadataError("Package descriptor must be a mapping/object at the top level.")

    # A bare `version: 1.0` loads as a float.
    version = str(data.get("version") or "").strip()
    if not version:
        raise MetadataError(f"Package descriptor must define `version`: {meta_path}")

    return PackageMetadata(
        name=str(data.get("name") or "").strip(),
        version=version,
        description=str(data.get("description") or "").strip(),
    )
