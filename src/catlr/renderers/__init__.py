"""Renderers presenting the directory tree and file contents."""

from .base_renderer import FileRenderer, TreeRenderer
from .external_renderer import ExternalFileRenderer, ExternalTreeRenderer, command_exists
from .native_renderer import NativeFileRenderer, NativeTreeRenderer
from .selection import select_file_renderer, select_tree_renderer

__all__ = [
    "ExternalFileRenderer",
    "ExternalTreeRenderer",
    "FileRenderer",
    "NativeFileRenderer",
    "NativeTreeRenderer",
    "TreeRenderer",
    "command_exists",
    "select_file_renderer",
    "select_tree_renderer",
]
