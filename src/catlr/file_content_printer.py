"""File content printer for the recursive content listing.

This module walks the target directory, prunes directories hidden on the listing axis,
selects files on the printing axis, and streams each selected file through a file
renderer with a header naming it.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .file_system_tree.file_identifier import FileIdentifier
from .file_system_tree.permission_action import PermissionAction
from .filters.filter_set import Filters
from .renderers.base_renderer import FileRenderer
from .renderers.native_renderer import NativeFileRenderer
from .types import PathType

IO_LOOP_WARNING = "[Warning: Skipping file to avoid I/O loop (file is program output)]"


@dataclass(frozen=True)
class FileInfo:
    """A file selected for printing.

    Attributes:
        path: Path to the file.
        relative_path: Path relative to the root, with ``/`` separators, for display.
    """

    path: Path
    relative_path: str


class FileContentPrinter:
    """Streams the contents of the files selected by the printing filters.

    Traversal is depth-first in name order and uses an explicit stack. Each directory
    is checked against the listing filters before its children are queued, so a hidden
    directory is never read. Files are checked against the printing filters only; a
    hidden file is skipped without affecting its siblings. Symbolic links to files are
    printed, symbolic links to directories are not followed.

    Output is a mix of ``str`` (headers and separators) and ``bytes`` (file contents as
    produced by the renderer).

    Attributes:
        root_path (Path): Directory whose files are printed.
        filters (Filters): Listing and printing filters.
        renderer (FileRenderer): Renderer producing each file's contents.
        permission_action (PermissionAction): How to handle unreadable directories.
        output_identity (Optional[FileIdentifier]): File that output is redirected to,
            which is never printed.

    Example:
        >>> printer = FileContentPrinter("src", Filters())  # doctest: +SKIP
        >>> for chunk in printer.yield_file_contents():  # doctest: +SKIP
        ...     sys.stdout.write(chunk if isinstance(chunk, str) else chunk.decode())
        --- main.py ---
        print("hello")
    """

    def __init__(
        self,
        root_path: PathType,
        filters: Optional[Filters] = None,
        renderer: Optional[FileRenderer] = None,
        permission_action: PermissionAction = PermissionAction.IGNORE,
        output_identity: Optional[FileIdentifier] = None,
    ) -> None:
        self.root_path = Path(root_path)
        self.filters = filters if filters is not None else Filters()
        self.renderer = renderer if renderer is not None else NativeFileRenderer()
        self.permission_action = permission_action
        self.output_identity = output_identity

    def _list_directory(self, directory: Path) -> List[Path]:
        try:
            names = sorted(os.listdir(directory))
        except PermissionError as e:
            if self.permission_action == PermissionAction.RAISE:
                raise PermissionError(f"Access denied to {directory}: {e}")
            return []
        except OSError as e:
            if self.permission_action == PermissionAction.RAISE:
                raise PermissionError(f"Error accessing {directory}: {e}")
            return []
        return [directory / name for name in names]

    def iterate_files(self) -> Iterator[FileInfo]:
        """Iterate over the files selected for printing.

        Yields:
            FileInfo for each selected file, in depth-first name order.

        Raises:
            PermissionError: If a directory cannot be read and permission_action is RAISE.
        """
        pending = list(reversed(self._list_directory(self.root_path)))
        list_filters = self.filters.list_filters
        print_filters = self.filters.print_filters

        while pending:
            path = pending.pop()
            try:
                is_dir = path.is_dir() and not path.is_symlink()
                is_file = not is_dir and path.is_file()
            except OSError:
                # An entry that cannot be stat'ed is skipped, not fatal
                continue
            if is_dir:
                if list_filters.is_path_visible(path, self.root_path):
                    pending.extend(reversed(self._list_directory(path)))
                continue
            if not is_file:
                continue
            if print_filters.is_path_visible(path, self.root_path):
                yield FileInfo(path=path, relative_path=path.relative_to(self.root_path).as_posix())

    def _is_output_file(self, path: Path) -> bool:
        if self.output_identity is None:
            return False
        return FileIdentifier.from_path(path) == self.output_identity

    def yield_file_contents(self) -> Iterator[Union[str, bytes]]:
        """Stream a header, the rendered contents and a separator for each selected file.

        The file that standard output is redirected to is reported on stderr and skipped.
        A file that fails while being read is reported on stderr after whatever output
        it already produced.

        Yields:
            Header and separator strings, and content chunks as bytes.
        """
        for file_info in self.iterate_files():
            header = f"--- {file_info.relative_path} ---"
            if self._is_output_file(file_info.path):
                print(header, file=sys.stderr)
                print(IO_LOOP_WARNING, file=sys.stderr)
                yield "\n"
                continue

            yield header + "\n"
            try:
                yield from self.renderer.render_file(file_info.path)
            except OSError as e:
                print(f"Warning: Failed to read '{file_info.relative_path}': {e}", file=sys.stderr)
            yield "\n"
