"""Unit tests for include/exclude filter evaluation."""

from pathlib import Path
from unittest.mock import patch

import pytest

from catlr.filters.filter_set import FilterSet, Filters, is_visible


class TestIsVisible:
    """The four-step visibility decision."""

    def test_include_overrides_exclude(self):
        assert is_visible("build/main.js", "main.js", includes=["build/main.js"], excludes=["build/"])

    def test_exclude_hides_when_no_include_matches(self):
        assert not is_visible("build/out.js", "out.js", includes=["build/main.js"], excludes=["build/"])

    def test_include_only_mode(self):
        assert not is_visible("x.txt", "x.txt", includes=["*.md"], excludes=[])
        assert is_visible("notes.md", "notes.md", includes=["*.md"], excludes=[])

    def test_default_mode_shows_unmatched(self):
        assert is_visible("x.txt", "x.txt", includes=[], excludes=["*.log"])

    def test_default_mode_hides_excluded(self):
        assert not is_visible("server.log", "server.log", includes=[], excludes=["*.log"])

    def test_no_patterns_shows_everything(self):
        assert is_visible("anything/at/all", "all", includes=[], excludes=[])

    def test_any_include_suffices(self):
        assert is_visible("a.h", "a.h", includes=["*.cpp", "*.h"], excludes=["*"])

    def test_pattern_order_does_not_matter(self):
        path, name = "src/gen/a.py", "a.py"
        first = is_visible(path, name, includes=["*.py", "README.md"], excludes=["gen", "src/"])
        second = is_visible(path, name, includes=["README.md", "*.py"], excludes=["src/", "gen"])
        assert first == second

    def test_idempotent(self):
        args = ("build/main.js", "main.js", ["build/main.js"], ["build/"])
        assert is_visible(*args) == is_visible(*args)

    def test_accepts_tuples(self):
        assert not is_visible("a.log", "a.log", includes=(), excludes=("*.log",))


class TestFilterSet:
    """FilterSet construction and delegation."""

    def test_empty(self):
        filters = FilterSet()
        assert filters.includes == []
        assert filters.excludes == []
        assert not filters.has_rules()
        assert filters.is_visible("a", "a")

    def test_constructor_patterns_are_normalized(self):
        filters = FilterSet(includes=["build\\main.js"], excludes=["build\\"])
        assert filters.includes == ["build/main.js"]
        assert filters.excludes == ["build/"]

    def test_add_preserves_order(self):
        filters = FilterSet()
        filters.add_exclude("b")
        filters.add_exclude("a")
        filters.add_include("z")
        filters.add_include("y")
        assert filters.excludes == ["b", "a"]
        assert filters.includes == ["z", "y"]

    @pytest.mark.parametrize("includes,excludes", [(["*.py"], []), ([], ["*.log"])])
    def test_has_rules(self, includes, excludes):
        assert FilterSet(includes=includes, excludes=excludes).has_rules()

    def test_is_visible_uses_both_lists(self):
        filters = FilterSet(includes=["build/main.js"], excludes=["build/"])
        assert filters.is_visible("build/main.js", "main.js")
        assert not filters.is_visible("build/out.js", "out.js")
        assert not filters.is_visible("src/a.cpp", "a.cpp")

    def test_repr(self):
        filters = FilterSet(includes=["*.py"], excludes=["build/"])
        assert repr(filters) == "FilterSet(includes=['*.py'], excludes=['build/'])"


class TestIsPathVisible:
    """Deriving relative paths from filesystem paths."""

    def test_derives_relative_path_and_filename(self, tmp_path):
        filters = FilterSet(excludes=["src/gen/"])
        assert not filters.is_path_visible(tmp_path / "src" / "gen" / "a.py", tmp_path)
        assert filters.is_path_visible(tmp_path / "src" / "a.py", tmp_path)

    def test_bare_name_uses_last_component(self, tmp_path):
        filters = FilterSet(excludes=["node_modules"])
        assert not filters.is_path_visible(tmp_path / "web" / "node_modules", tmp_path)
        assert filters.is_path_visible(tmp_path / "web" / "node_modules" / "index.js", tmp_path)

    def test_accepts_strings(self, tmp_path):
        filters = FilterSet(excludes=["*.log"])
        assert not filters.is_path_visible(str(tmp_path / "a.log"), str(tmp_path))

    def test_path_outside_root_is_hidden(self, tmp_path):
        assert not FilterSet().is_path_visible(Path("/elsewhere/file.txt"), tmp_path / "root")

    def test_undecodable_name_is_hidden(self, tmp_path):
        # A surrogate escape stands in for a byte that is not valid UTF-8
        assert not FilterSet().is_path_visible(tmp_path / "bad\udcff.txt", tmp_path)

    def test_derivation_failure_does_not_raise(self, tmp_path):
        with patch("catlr.filters.filter_set.Path.relative_to", side_effect=ValueError("unrelated")):
            assert FilterSet().is_path_visible(tmp_path / "a.txt", tmp_path) is False


class TestFilters:
    """The list/print axis pair."""

    def test_axes_are_independent(self):
        filters = Filters()
        filters.list_filters.add_exclude(".git")
        filters.print_filters.add_include("*.py")
        assert filters.list_filters.excludes == [".git"]
        assert filters.list_filters.includes == []
        assert filters.print_filters.includes == ["*.py"]
        assert filters.print_filters.excludes == []

    def test_add_exclude_applies_to_both_axes(self):
        filters = Filters()
        filters.add_exclude("node_modules")
        assert filters.list_filters.excludes == ["node_modules"]
        assert filters.print_filters.excludes == ["node_modules"]

    def test_add_include_applies_to_both_axes(self):
        filters = Filters()
        filters.add_include("src\\main.py")
        assert filters.list_filters.includes == ["src/main.py"]
        assert filters.print_filters.includes == ["src/main.py"]

    def test_accepts_existing_filter_sets(self):
        list_filters = FilterSet(excludes=["a"])
        print_filters = FilterSet(includes=["b"])
        filters = Filters(list_filters, print_filters)
        assert filters.list_filters is list_filters
        assert filters.print_filters is print_filters
