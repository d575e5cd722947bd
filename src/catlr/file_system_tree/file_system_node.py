"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file, directory or symlink in the listing tree.

    Extends anytree.Node with the entry kind and its path relative to the traversal
    root, so that rendering and counting never have to touch the filesystem again.

    Attributes:
        name (str): The name of the entry (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        relative_path (str): Path relative to the traversal root with ``/`` separators.
            Empty for the root node.
        is_dir (bool): True if this node represents a directory that was descended into.
        is_symlink (bool): True if this node represents a symbolic link.
        symlink_target (Optional[str]): Target of the symlink, if it could be read.

    Example:
        >>> root = FileSystemNode("project", is_dir=True)
        >>> src = FileSystemNode("src", parent=root, relative_path="src", is_dir=True)
        >>> main = FileSystemNode("main.py", parent=src, relative_path="src/main.py")
        >>> main.relative_path
        'src/main.py'
        >>> [child.name for child in root.children]
        ['src']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        relative_path: str = "",
        is_dir: bool = False,
        is_symlink: bool = False,
        symlink_target: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.relative_path = relative_path
        self.is_dir = is_dir
        self.is_symlink = is_symlink
        self.symlink_target = symlink_target

    @property
    def display_name(self) -> str:
        """Name as shown in the tree: directories get a trailing slash, symlinks their target.

        Example:
            >>> FileSystemNode("docs", is_dir=True).display_name
            'docs/'
            >>> FileSystemNode("latest", is_symlink=True, symlink_target="v2").display_name
            'latest → v2 [symlink]'
        """
        if self.is_symlink:
            if self.symlink_target:
                return f"{self.name} → {self.symlink_target} [symlink]"
            return f"{self.name} [symlink]"
        if self.is_dir:
            return f"{self.name}/"
        return self.name
