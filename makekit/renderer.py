"""
renderer.py

Responsibility: Render the `include` stanza a project Makefile uses to pull in bundled snippets.

Rules:
- One `include <absolute path>` line per requested module, in request order.
- Paths are escaped for Make (spaces, `#`, `$`).
- Repeated names are emitted once.
- Unknown names are rejected here; the registry itself stays permissive.
- The snippet files are referenced, never read or rendered.

This module intentionally does NOT know about CLI parsing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from makekit import __version__
from makekit.registry import PACKAGE_ROOT, module_path

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(PACKAGE_ROOT) / "templates"
INCLUDES_TEMPLATE = "Makefile.includes.j2"


class RenderError(RuntimeError):
    pass


@dataclass(frozen=True)
class IncludeEntry:
    name: str
    path: str


def _unique(names: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for name in names:
        if name not in seen:
            seen.add(name)
            out.append(name)
    return out


def _resolve_entries(names: Sequence[str]) -> list[IncludeEntry]:
    entries: list[IncludeEntry] = []
    unknown: list[str] = []
    for name in _unique(names):
        path = module_path(name)
        if path is None:
            unknown.append(name)
            continue
        entries.append(IncludeEntry(name=name, path=path))
    if unknown:
        raise RenderError(f"Unknown module(s): {', '.join(unknown)}")
    return entries


def make_escape(path: str) -> str:
    """
    Quote a file name for a Make `include` line.

    Make splits file names on spaces, expands `$` and starts a comment at `#`.
    """
    escaped = path.replace("$", "$$")
    for ch in (" ", "#"):
        escaped = escaped.replace(ch, "\\" + ch)
    return escaped


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["make_escape"] = make_escape
    return env


def render_includes(names: Sequence[str]) -> str:
    """
    Render the include stanza for `names`.

    Raises RenderError when no names are given or a name is not registered.
    """
    if not names:
        raise RenderError("At least one module name is required.")

    entries = _resolve_entries(names)
    logger.debug("Rendering includes for %s", [e.name for e in entries])
    try:
        template = _environment().get_template(INCLUDES_TEMPLATE)
        return template.render(modules=entries, version=__version__)
    except Exception as e:  # noqa: BLE001 - surface as RenderError
        raise RenderError(f"Failed rendering template: {INCLUDES_TEMPLATE}") from e


def write_includes(
    names: Sequence[str],
    destination: str | Path,
    *,
    overwrite: bool = False,
) -> Path:
    """
    Render the include stanza and write it to `destination`.

    Existing files are left alone unless `overwrite` is set.
    """
    dst_path = Path(destination).resolve()
    if dst_path.is_dir():
        raise RenderError(f"Destination is a directory: {dst_path}")
    if dst_path.exists() and not overwrite:
        raise RenderError(f"File already exists: {dst_path} (use --overwrite to allow)")

    text = render_includes(names)
    dst_path.parent.mkdir(parents=True, exist_ok=True)
    # Normalize newlines for stable cross-platform output.
    dst_path.write_text(text, encoding="utf-8", newline="\n")
    logger.debug("Wrote %s", dst_path)
    return dst_path
