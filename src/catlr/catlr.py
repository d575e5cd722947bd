"""Directory tree and file content listing with streaming output.

This module ties the filters, the renderers and the content printer together into the
complete listing: a tree section followed by a recursive file contents section.
"""

from pathlib import Path
from typing import Iterator, Optional, Union

from catlr.config import Config
from catlr.file_content_printer import FileContentPrinter
from catlr.file_system_tree.file_identifier import FileIdentifier
from catlr.file_system_tree.permission_action import PermissionAction
from catlr.filters.filter_set import Filters
from catlr.renderers.base_renderer import FileRenderer, TreeRenderer
from catlr.renderers.selection import select_file_renderer, select_tree_renderer
from catlr.types import PathType


class StreamingCatlr:
    """Streaming directory listing that produces output incrementally.

    The directory is resolved to its canonical absolute path on construction, and the
    renderers are chosen once from the configuration. Each ``stream_*`` method yields
    output pieces as they are produced: text as ``str``, file contents as ``bytes``.

    Attributes:
        directory (Path): Canonical path of the directory being listed.
        filters (Filters): Listing and printing filters.
        config (Config): Configured presentation commands.
        permission_action (PermissionAction): How to handle unreadable directories.

    Example:
        >>> filters = Filters()
        >>> filters.add_exclude(".git/")
        >>> listing = StreamingCatlr("src", filters=filters)  # doctest: +SKIP
        >>> for piece in listing.stream_tree():  # doctest: +SKIP
        ...     print(piece, end="")
        --- Directory Tree for: src ---
        Located at: /home/user/project/src
        <BLANKLINE>
        Info: External 'tree' command does not support filters. Using built-in tree.
        src/
        └── main.py
        <BLANKLINE>

    Raises:
        ValueError: If the directory does not exist or is not a directory.
        PermissionError: If access is denied and permission_action is RAISE.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        filters: Optional[Filters] = None,
        config: Optional[Config] = None,
        permission_action: Union[str, PermissionAction] = PermissionAction.IGNORE,
        tree_renderer: Optional[TreeRenderer] = None,
        file_renderer: Optional[FileRenderer] = None,
        output_identity: Optional[FileIdentifier] = None,
        interactive: bool = False,
    ):
        """Initialize the listing.

        Args:
            directory: Directory to list. Can be any path-like object.
            filters: Listing and printing filters. Defaults to showing everything.
            config: Presentation commands. Defaults to ``tree`` and ``bat``.
            permission_action: How to handle permission errors during traversal.
                Either "ignore" or "raise", or a PermissionAction value.
            tree_renderer: Renderer for the tree section. Selected from config if None.
            file_renderer: Renderer for file contents. Selected from config if None.
            output_identity: File that output is redirected to; it is never printed.
            interactive: Whether output goes to a terminal.

        Raises:
            ValueError: If directory is invalid or permission_action is unknown.
        """
        try:
            self.directory = Path(directory).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise ValueError(f"Could not resolve path. {e}") from e
        if not self.directory.is_dir():
            raise ValueError(f"'{directory}' is not a valid directory")

        if isinstance(permission_action, str):
            try:
                permission_action = PermissionAction(permission_action.lower())
            except ValueError:
                raise ValueError(
                    f"Invalid permission_action: {permission_action}. " "Must be one of: 'ignore', 'raise'"
                )

        self.filters = filters if filters is not None else Filters()
        self.config = config if config is not None else Config()
        self.permission_action = permission_action

        self._tree_notice: Optional[str] = None
        if tree_renderer is None:
            tree_renderer, self._tree_notice = select_tree_renderer(
                self.config, self.filters.list_filters, permission_action=permission_action
            )
        self._tree_renderer = tree_renderer

        if file_renderer is None:
            file_renderer = select_file_renderer(self.config, interactive=interactive)

        self._content_printer = FileContentPrinter(
            self.directory,
            self.filters,
            file_renderer,
            permission_action=permission_action,
            output_identity=output_identity,
        )

    def stream_tree(self) -> Iterator[str]:
        """Stream the tree section, one newline-terminated line at a time.

        Raises:
            PermissionError: If access is denied and permission_action is RAISE.
        """
        yield f"--- Directory Tree for: {self.directory.name} ---\n"
        yield f"Located at: {self.directory}\n"
        yield "\n"
        if self._tree_notice:
            yield self._tree_notice + "\n"
        for line in self._tree_renderer.render_tree(self.directory):
            yield line + "\n"
        yield "\n"

    def stream_contents(self) -> Iterator[Union[str, bytes]]:
        """Stream the file contents section, ending with the end-of-listing marker.

        Raises:
            PermissionError: If access is denied and permission_action is RAISE.
        """
        yield "--- File Contents (Recursive) ---\n"
        yield from self._content_printer.yield_file_contents()
        yield "--- End of Listing ---\n"
