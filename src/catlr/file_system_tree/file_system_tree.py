"""Filtered file system tree for the directory listing.

This module provides the FileSystemTree class, which walks a directory under the
listing filters and renders the result in the layout of the Unix ``tree`` command.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from catlr.file_system_tree.file_system_node import FileSystemNode
from catlr.file_system_tree.permission_action import PermissionAction
from catlr.filters.filter_set import FilterSet
from catlr.types import PathType


class FileSystemTree:
    """A tree representation of a directory structure filtered by the listing axis.

    The tree is built lazily on first access with an explicit work-list: each directory
    taken from the list is read, every child is checked against the listing filters, and
    only visible subdirectories are queued for reading. A hidden directory is therefore
    pruned entirely; nothing beneath it is ever listed.

    Symbolic Link Behavior:
        Symbolic links are shown as leaf entries together with their target and are never
        descended into, whether they point at a file or a directory.

    Permission Handling:
        - IGNORE (default): an unreadable directory is shown without contents
        - RAISE: a PermissionError is raised as soon as a directory cannot be read

    Attributes:
        root_path (Path): The directory being represented.
        list_filters (Optional[FilterSet]): Filters deciding which entries are listed.
        permission_action (PermissionAction): How to handle permission errors.

    Example:
        >>> tree = FileSystemTree(".", FilterSet(excludes=[".git/"]))  # doctest: +SKIP
        >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
        ...     print(line)
        project/
        ├── README.md
        └── src/
            └── main.py
    """

    def __init__(
        self,
        root_path: PathType,
        list_filters: Optional[FilterSet] = None,
        permission_action: PermissionAction = PermissionAction.IGNORE,
    ) -> None:
        self.root_path = Path(root_path)
        self.list_filters = list_filters
        self.permission_action = permission_action
        self._tree: Optional[FileSystemNode] = None

    def get_tree(self) -> Optional[FileSystemNode]:
        """Get the root node of the filesystem tree, building it on first access.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            PermissionError: If permission is denied and permission_action is RAISE.
        """
        if self._tree is None:
            self._build_tree()
        return self._tree

    def _build_tree(self) -> None:
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        root = FileSystemNode(self.root_path.resolve().name, is_dir=True)
        pending: List[Tuple[Path, FileSystemNode]] = [(self.root_path, root)]

        while pending:
            directory, node = pending.pop()
            for name in self._list_directory(directory):
                child_path = directory / name
                if self.list_filters is not None and not self.list_filters.is_path_visible(
                    child_path, self.root_path
                ):
                    continue
                child = self._create_node(child_path, node)
                if child.is_dir:
                    pending.append((child_path, child))

        self._tree = root

    def _list_directory(self, directory: Path) -> List[str]:
        """Return the sorted entry names of a directory, honoring permission_action."""
        try:
            return sorted(os.listdir(directory))
        except PermissionError as e:
            if self.permission_action == PermissionAction.RAISE:
                raise PermissionError(f"Access denied to {directory}: {e}")
        except OSError as e:
            if self.permission_action == PermissionAction.RAISE:
                raise PermissionError(f"Error accessing {directory}: {e}")
        return []

    def _create_node(self, path: Path, parent: FileSystemNode) -> FileSystemNode:
        relative_path = f"{parent.relative_path}/{path.name}" if parent.relative_path else path.name

        try:
            is_symlink = path.is_symlink()
            is_dir = not is_symlink and path.is_dir()
        except OSError:
            # Entry cannot be stat'ed; show it as a plain leaf
            return FileSystemNode(path.name, parent=parent, relative_path=relative_path)

        if is_symlink:
            try:
                target: Optional[str] = os.readlink(path)
            except OSError:
                target = None
            return FileSystemNode(
                path.name, parent=parent, relative_path=relative_path, is_symlink=True, symlink_target=target
            )

        return FileSystemNode(path.name, parent=parent, relative_path=relative_path, is_dir=is_dir)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a tree representation of the filesystem one line at a time.

        Yields:
            Lines of the tree representation without trailing newlines.

        Raises:
            PermissionError: If access is denied and permission_action is RAISE.

        Example:
            >>> tree = FileSystemTree("src")  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            src/
            ├── main.py
            └── utils/
                └── helpers.py
        """
        tree = self.get_tree()
        if tree is None:
            return

        def write_children(node: FileSystemNode, prefix: str) -> Iterator[str]:
            children = node.children
            for i, child in enumerate(children):
                is_last = i == len(children) - 1
                connector = "└── " if is_last else "├── "
                yield f"{prefix}{connector}{child.display_name}"
                if child.is_dir:
                    yield from write_children(child, prefix + ("    " if is_last else "│   "))

        yield f"{tree.name}/"
        yield from write_children(tree, "")
