"""
registry.py

Responsibility: Map short module names to the Makefile snippets bundled in this package.

The registry is a fixed, read-only lookup table. Paths are relative to the package
directory and are turned into absolute paths by `resolve_path`; nothing here reads
or checks the snippet files themselves.
"""

from __future__ import annotations

import os
from types import MappingProxyType

PACKAGE_ROOT = os.path.dirname(os.path.abspath(__file__))

MODULES = MappingProxyType(
    {
        "git": "git/MAKE_GIT_v1",
        "docker": "docker/MAKE_DOCKER_v1",
        "symfony": "sf-7/MAKE_SYMFONY_v1",
        "phpcs": "phpcs/MAKE_PHPCS_v1",
        "phpstan": "phpstan/MAKE_PHPSTAN_v1",
        "phpunit": "phpunit/MAKE_PHPUNIT_v1",
        "nuxt": "nuxt-3/MAKE_NUXT_v1",
        "nuxtTests": "nuxt-3/MAKE_NUXT_TESTS_v1",
        "nuxtQA": "nuxt-3/MAKE_NUXT_QA_v1",
        "claude": "claude/MAKE_CLAUDE_v1",
    }
)


def resolve_path(relative_path: str) -> str:
    """
    Return the absolute path of `relative_path` inside the installed package.

    Purely lexical: the path is joined and normalized, never checked on disk.
    The package root is always kept as the prefix, even for input starting with
    a separator, and a trailing separator on the input is kept on the result.
    """
    separators = "/" + os.sep
    joined = os.path.normpath(os.path.join(PACKAGE_ROOT, relative_path.lstrip(separators)))
    if relative_path.endswith(tuple(separators)) and not joined.endswith(os.sep):
        joined += os.sep
    return joined


def module_path(name: str) -> str | None:
    """Absolute path of a registered module, or None for an unknown name."""
    relative = MODULES.get(name)
    if relative is None:
        return None
    return resolve_path(relative)
