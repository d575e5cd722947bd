"""Startup selection between external and built-in renderers."""

from typing import Optional, Tuple

from catlr.config import Config
from catlr.file_system_tree.permission_action import PermissionAction
from catlr.filters.filter_set import FilterSet

from .base_renderer import FileRenderer, TreeRenderer
from .external_renderer import ExternalFileRenderer, ExternalTreeRenderer, command_exists
from .native_renderer import NativeFileRenderer, NativeTreeRenderer

FALLBACK_FILE_COMMAND = "cat"


def select_tree_renderer(
    config: Config,
    list_filters: FilterSet,
    permission_action: PermissionAction = PermissionAction.IGNORE,
) -> Tuple[TreeRenderer, Optional[str]]:
    """Choose the tree renderer for this run.

    The external tree command is used only when it is installed and no listing filters
    are configured, since it cannot apply them.

    Args:
        config: Configured commands.
        list_filters: Listing-axis filters.
        permission_action: How the built-in renderer handles unreadable directories.

    Returns:
        The renderer, and an informational notice to show the user when the built-in
        renderer was chosen (None otherwise).
    """
    native = NativeTreeRenderer(list_filters, permission_action=permission_action)
    if not command_exists(config.tree_command):
        return native, f"Info: '{config.tree_command}' not found. Using built-in tree implementation."
    if list_filters.has_rules():
        return native, "Info: External 'tree' command does not support filters. Using built-in tree."
    return ExternalTreeRenderer(config.tree_command), None


def select_file_renderer(config: Config, interactive: bool = False) -> FileRenderer:
    """Choose the file content renderer for this run.

    Preference order is the configured command, then ``cat``, then the built-in reader.

    Args:
        config: Configured commands.
        interactive: Whether output goes to a terminal.

    Returns:
        The selected renderer.
    """
    if command_exists(config.file_command):
        return ExternalFileRenderer(config.file_command, interactive=interactive)
    if command_exists(FALLBACK_FILE_COMMAND):
        return ExternalFileRenderer(FALLBACK_FILE_COMMAND)
    return NativeFileRenderer()
