"""Include/exclude filter evaluation for the listing and printing axes."""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from catlr.filters.pattern_matcher import normalize_pattern, pattern_matches
from catlr.types import PathType


def is_visible(relative_path: str, filename: str, includes: Sequence[str], excludes: Sequence[str]) -> bool:
    """Decide whether a path is shown under a pair of include/exclude pattern lists.

    Includes take precedence over excludes, so a file inside an excluded directory can
    still be shown by including it explicitly. When any include pattern is present, only
    paths matching an include are visible.

    Args:
        relative_path: Path relative to the traversal root, using ``/`` separators.
        filename: Final component of the path.
        includes: Include patterns.
        excludes: Exclude patterns.

    Returns:
        True if the path is visible, False if it is hidden.

    Example:
        >>> is_visible("build/main.js", "main.js", ["build/main.js"], ["build/"])
        True
        >>> is_visible("x.txt", "x.txt", ["*.md"], [])
        False
        >>> is_visible("x.txt", "x.txt", [], ["*.log"])
        True
    """
    if any(pattern_matches(relative_path, filename, pattern) for pattern in includes):
        return True
    if any(pattern_matches(relative_path, filename, pattern) for pattern in excludes):
        return False
    # Include-only mode: nothing matched, but includes were given
    return not includes


class FilterSet:
    """Include and exclude patterns for a single filtering axis.

    Patterns are normalized on insertion and kept in the order they were added. The
    order does not change any decision but keeps iteration deterministic.

    Attributes:
        includes (List[str]): Normalized include patterns.
        excludes (List[str]): Normalized exclude patterns.

    Example:
        >>> filters = FilterSet(excludes=["build/"])
        >>> filters.add_include("build\\\\main.js")
        >>> filters.includes
        ['build/main.js']
        >>> filters.is_visible("build/main.js", "main.js")
        True
        >>> filters.is_visible("build/out.js", "out.js")
        False
    """

    def __init__(self, includes: Optional[Iterable[str]] = None, excludes: Optional[Iterable[str]] = None) -> None:
        self.includes: List[str] = []
        self.excludes: List[str] = []
        for pattern in includes or ():
            self.add_include(pattern)
        for pattern in excludes or ():
            self.add_exclude(pattern)

    def add_include(self, pattern: str) -> None:
        """Append an include pattern."""
        self.includes.append(normalize_pattern(pattern))

    def add_exclude(self, pattern: str) -> None:
        """Append an exclude pattern."""
        self.excludes.append(normalize_pattern(pattern))

    def has_rules(self) -> bool:
        """Check whether any include or exclude pattern is configured."""
        return bool(self.includes or self.excludes)

    def is_visible(self, relative_path: str, filename: str) -> bool:
        """Decide visibility of an already relative path. See :func:`is_visible`."""
        return is_visible(relative_path, filename, self.includes, self.excludes)

    def is_path_visible(self, path: PathType, root: PathType) -> bool:
        """Decide visibility of a filesystem path beneath a traversal root.

        The relative path is derived from ``path`` and ``root``. If that fails because
        the path is not under the root or its name cannot be represented as text, the
        path is treated as hidden.

        Args:
            path: Path of the entry being checked.
            root: Root directory of the traversal.

        Returns:
            True if the path is visible, False otherwise.

        Example:
            >>> FilterSet().is_path_visible("/srv/project/src/a.py", "/srv/project")
            True
            >>> FilterSet().is_path_visible("/elsewhere/a.py", "/srv/project")
            False
        """
        try:
            relative = Path(path).relative_to(root)
            relative_path = relative.as_posix()
            relative_path.encode("utf-8")
        except (ValueError, UnicodeError):
            return False
        return self.is_visible(relative_path, relative.name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(includes={self.includes!r}, excludes={self.excludes!r})"


class Filters:
    """The pair of filter sets used for one run.

    Attributes:
        list_filters (FilterSet): Controls the tree view and which directories are traversed.
        print_filters (FilterSet): Controls which files have their contents printed.

    Example:
        >>> filters = Filters()
        >>> filters.add_exclude("node_modules")
        >>> filters.list_filters.excludes, filters.print_filters.excludes
        (['node_modules'], ['node_modules'])
    """

    def __init__(self, list_filters: Optional[FilterSet] = None, print_filters: Optional[FilterSet] = None) -> None:
        self.list_filters = list_filters if list_filters is not None else FilterSet()
        self.print_filters = print_filters if print_filters is not None else FilterSet()

    def add_include(self, pattern: str) -> None:
        """Include a pattern on both axes."""
        self.list_filters.add_include(pattern)
        self.print_filters.add_include(pattern)

    def add_exclude(self, pattern: str) -> None:
        """Exclude a pattern on both axes."""
        self.list_filters.add_exclude(pattern)
        self.print_filters.add_exclude(pattern)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(list_filters={self.list_filters!r}, print_filters={self.print_filters!r})"
