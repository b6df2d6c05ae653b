"""
cli.py

Responsibility: CLI entrypoint for makekit.

Commands:
- `path RELATIVE`: resolve a path against the package root
- `module NAME`: absolute path of a registered snippet
- `list`: every registered snippet with its absolute path
- `version`: package version
- `includes NAME...`: render the Makefile include stanza (stdout or --output)

Typical Makefile use:

    makekit includes git docker -o .makekit.mk

then `include .makekit.mk` in the project Makefile. The generated file escapes
paths that contain spaces.

This module should orchestrate behavior but keep concerns isolated:
- Lookup and path resolution: `registry.py`
- Include rendering: `renderer.py`
"""

from __future__ import annotations

import argparse
import logging
import sys

from makekit import __version__
from makekit.registry import MODULES, module_path, resolve_path
from makekit.renderer import RenderError, render_includes, write_includes

logger = logging.getLogger(__name__)


class CLIError(RuntimeError):
    pass


def path_cmd(args: argparse.Namespace) -> int:
    print(resolve_path(args.relative_path))
    return 0


def module_cmd(args: argparse.Namespace) -> int:
    path = module_path(args.name)
    if path is None:
        raise CLIError(f"Unknown module: {args.name} (see `makekit list`)")
    print(path)
    return 0


def list_cmd(args: argparse.Namespace) -> int:
    for name in MODULES:
        print(f"{name}\t{resolve_path(MODULES[name])}")
    return 0


def version_cmd(args: argparse.Namespace) -> int:
    print(__version__)
    return 0


def includes_cmd(args: argparse.Namespace) -> int:
    if args.output:
        written = write_includes(args.names, args.output, overwrite=bool(args.overwrite))
        logger.info("Wrote include stanza to %s", written)
    else:
        sys.stdout.write(render_includes(args.names))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="makekit", description="Locate bundled Makefile snippets")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    path = sub.add_parser("path", help="Resolve a path relative to the package root")
    path.add_argument("relative_path", help="Path relative to the package root (e.g. git/MAKE_GIT_v1)")
    path.set_defaults(func=path_cmd)

    module = sub.add_parser("module", help="Print the absolute path of a registered module")
    module.add_argument("name", help="Module name (e.g. git, docker, nuxtQA)")
    module.set_defaults(func=module_cmd)

    lst = sub.add_parser("list", help="List registered modules and their paths")
    lst.set_defaults(func=list_cmd)

    version = sub.add_parser("version", help="Print the package version")
    version.set_defaults(func=version_cmd)

    inc = sub.add_parser("includes", help="Render Makefile include lines for modules")
    inc.add_argument("names", nargs="+", help="Module names, in include order")
    inc.add_argument("-o", "--output", default=None, help="Write to this file instead of stdout")
    inc.add_argument("--overwrite", action="store_true", help="Allow replacing an existing output file")
    inc.set_defaults(func=includes_cmd)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return int(args.func(args))
    except (CLIError, RenderError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
