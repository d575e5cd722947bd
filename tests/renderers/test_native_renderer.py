"""Tests for the built-in tree and file renderers."""

import pytest

from catlr.filters.filter_set import FilterSet
from catlr.renderers.native_renderer import NativeFileRenderer, NativeTreeRenderer


@pytest.fixture
def project(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("print('hi')\n")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    return tmp_path


def test_native_tree_renderer_without_filters(project):
    lines = list(NativeTreeRenderer().render_tree(project))
    assert lines == [
        f"{project.name}/",
        "├── .git/",
        "│   └── HEAD",
        "└── src/",
        "    └── main.py",
    ]


def test_native_tree_renderer_applies_list_filters(project):
    lines = list(NativeTreeRenderer(FilterSet(excludes=[".git"])).render_tree(project))
    assert lines == [f"{project.name}/", "└── src/", "    └── main.py"]


def test_native_file_renderer_copies_bytes(tmp_path):
    data = bytes(range(256)) * 100
    target = tmp_path / "blob.bin"
    target.write_bytes(data)

    assert b"".join(NativeFileRenderer().render_file(target)) == data


def test_native_file_renderer_chunks(tmp_path):
    target = tmp_path / "big.txt"
    target.write_bytes(b"x" * 10000)

    chunks = list(NativeFileRenderer(chunk_size=4096).render_file(target))
    assert [len(chunk) for chunk in chunks] == [4096, 4096, 1808]


def test_native_file_renderer_empty_file(tmp_path):
    target = tmp_path / "empty"
    target.touch()
    assert list(NativeFileRenderer().render_file(target)) == []


def test_native_file_renderer_unopenable_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"

    assert list(NativeFileRenderer().render_file(missing)) == []
    assert f"[Could not open file: {missing}]" in capsys.readouterr().err


def test_native_file_renderer_rejects_small_chunks():
    with pytest.raises(ValueError, match="chunk_size must be at least 4096"):
        NativeFileRenderer(chunk_size=1024)
