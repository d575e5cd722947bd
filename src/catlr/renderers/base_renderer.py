"""Renderer base classes defining how the tree and file contents are presented.

Presentation is kept behind two small interfaces so that the filtering and traversal
code never deals with external processes. Concrete renderers either draw the output
themselves or delegate to an external command such as ``tree`` or ``bat``.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from catlr.types import PathType


class TreeRenderer(ABC):
    """Abstract base class for directory tree renderers.

    Example:
        >>> class FlatRenderer(TreeRenderer):
        ...     def render_tree(self, path):
        ...         import os
        ...         yield from sorted(os.listdir(path))
    """

    @abstractmethod
    def render_tree(self, path: PathType) -> Iterator[str]:
        """Render the tree rooted at ``path``.

        Args:
            path: Directory to render.

        Yields:
            Lines of the rendered tree, in display order, without trailing newlines.
        """
        pass


class FileRenderer(ABC):
    """Abstract base class for file content renderers.

    Example:
        >>> class UpperRenderer(FileRenderer):
        ...     def render_file(self, path):
        ...         with open(path, "rb") as f:
        ...             yield f.read().upper()
    """

    @abstractmethod
    def render_file(self, path: PathType) -> Iterator[bytes]:
        """Render the contents of the file at ``path``.

        Args:
            path: File to render.

        Yields:
            Chunks of rendered output as raw bytes, so that encodings and terminal
            escape sequences pass through untouched.
        """
        pass
