import os
import re
from pathlib import Path

import pytest

import makekit
from makekit import registry
from makekit.registry import module_path
from makekit.renderer import RenderError, make_escape, render_includes, write_includes


def _include_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.startswith("include ")]


def test_render_includes_in_request_order() -> None:
    text = render_includes(["docker", "git", "nuxtQA"])
    assert _include_lines(text) == [
        f"include {make_escape(module_path('docker'))}",
        f"include {make_escape(module_path('git'))}",
        f"include {make_escape(module_path('nuxtQA'))}",
    ]
    assert f"makekit {makekit.__version__}" in text
    assert "# Snippets: docker, git, nuxtQA" in text
    assert text.endswith("\n")


def test_render_includes_drops_duplicates() -> None:
    text = render_includes(["git", "docker", "git"])
    assert _include_lines(text) == [
        f"include {make_escape(module_path('git'))}",
        f"include {make_escape(module_path('docker'))}",
    ]


def test_render_includes_rejects_unknown_names() -> None:
    with pytest.raises(RenderError, match="nonexistent"):
        render_includes(["git", "nonexistent"])


def test_render_includes_requires_names() -> None:
    with pytest.raises(RenderError):
        render_includes([])


def test_write_includes(tmp_path: Path) -> None:
    dst = tmp_path / "mk" / "includes.mk"
    written = write_includes(["symfony"], dst)
    assert written == dst.resolve()
    data = dst.read_bytes()
    assert b"\r\n" not in data
    assert _include_lines(data.decode("utf-8")) == [f"include {make_escape(module_path('symfony'))}"]


def test_write_includes_refuses_to_overwrite(tmp_path: Path) -> None:
    dst = tmp_path / "includes.mk"
    dst.write_text("keep me\n", encoding="utf-8")
    with pytest.raises(RenderError, match="already exists"):
        write_includes(["git"], dst)
    assert dst.read_text(encoding="utf-8") == "keep me\n"

    write_includes(["git"], dst, overwrite=True)
    assert _include_lines(dst.read_text(encoding="utf-8")) == [f"include {make_escape(module_path('git'))}"]


def test_make_escape() -> None:
    assert make_escape("/opt/pkg/git/MAKE_GIT_v1") == "/opt/pkg/git/MAKE_GIT_v1"
    assert make_escape("/a b/#c$d") == "/a\\ b/\\#c$$d"


def test_render_includes_escapes_spaces_in_install_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    root = tmp_path / "my pkg"
    monkeypatch.setattr(registry, "PACKAGE_ROOT", str(root))

    [line] = _include_lines(render_includes(["git"]))
    target = line[len("include ") :]
    assert re.search(r"(?<!\\) ", target) is None
    assert target.replace("\\ ", " ") == os.path.join(str(root), "git", "MAKE_GIT_v1")


def test_write_includes_rejects_directory(tmp_path: Path) -> None:
    with pytest.raises(RenderError, match="is a directory"):
        write_includes(["git"], tmp_path, overwrite=True)
