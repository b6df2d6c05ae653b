"""
makekit package

Modular Makefile snippets for Symfony 7 and Nuxt 3 projects with Docker Compose
integration, plus a small resolver that tells build tooling where they live.

Key responsibilities are split across modules:
- `registry.py`: module name -> bundled snippet path, and path resolution against the package root
- `metadata.py`: read the `package.yaml` descriptor (version)
- `renderer.py`: render the `include` stanza for a project Makefile
- `cli.py`: CLI entrypoint (`makekit path|module|list|version|includes`)
"""

from __future__ import annotations

from makekit.metadata import load_metadata
from makekit.registry import MODULES, PACKAGE_ROOT, module_path, resolve_path

__all__ = ["MODULES", "PACKAGE_ROOT", "__version__", "module_path", "resolve_path"]

__version__ = load_metadata().version
