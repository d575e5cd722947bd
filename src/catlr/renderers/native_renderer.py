"""Built-in renderers used when no external presentation tool is available."""

import sys
from typing import Iterator, Optional

from catlr.file_system_tree.file_system_tree import FileSystemTree
from catlr.file_system_tree.permission_action import PermissionAction
from catlr.filters.filter_set import FilterSet
from catlr.types import PathType

from .base_renderer import FileRenderer, TreeRenderer


class NativeTreeRenderer(TreeRenderer):
    """Draws the directory tree with FileSystemTree, honoring the listing filters.

    Attributes:
        list_filters (Optional[FilterSet]): Filters deciding which entries are listed.
        permission_action (PermissionAction): How to handle unreadable directories.
    """

    def __init__(
        self,
        list_filters: Optional[FilterSet] = None,
        permission_action: PermissionAction = PermissionAction.IGNORE,
    ) -> None:
        self.list_filters = list_filters
        self.permission_action = permission_action

    def render_tree(self, path: PathType) -> Iterator[str]:
        fs_tree = FileSystemTree(path, self.list_filters, permission_action=self.permission_action)
        yield from fs_tree.stream_tree_representation()


class NativeFileRenderer(FileRenderer):
    """Copies file contents unchanged, reading in fixed-size binary chunks.

    A file that cannot be opened is reported on stderr and produces no output. Errors
    raised while reading an opened file propagate to the caller.

    Attributes:
        chunk_size (int): Number of bytes read per chunk.

    Example:
        >>> import tempfile
        >>> with tempfile.NamedTemporaryFile(delete=False) as f:
        ...     _ = f.write(b"hello")
        >>> b"".join(NativeFileRenderer().render_file(f.name))
        b'hello'
        >>> import os
        >>> os.unlink(f.name)
    """

    MINIMUM_CHUNK_SIZE = 4096  # 4 KB

    def __init__(self, chunk_size: int = 65536) -> None:
        if chunk_size < self.MINIMUM_CHUNK_SIZE:
            raise ValueError(f"chunk_size must be at least {self.MINIMUM_CHUNK_SIZE} bytes, got {chunk_size}")
        self.chunk_size = chunk_size

    def render_file(self, path: PathType) -> Iterator[bytes]:
        try:
            file = open(path, "rb")
        except OSError:
            print(f"[Could not open file: {path}]", file=sys.stderr)
            return

        with file:
            while True:
                chunk = file.read(self.chunk_size)
                if not chunk:
                    break
                yield chunk
