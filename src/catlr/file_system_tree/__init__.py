"""Filtered file system tree for the directory listing.

This package provides classes for walking a directory under the listing filters,
pruning hidden subdirectories, and rendering the result as a tree.
"""

from .file_identifier import FileIdentifier
from .file_system_node import FileSystemNode
from .file_system_tree import FileSystemTree
from .permission_action import PermissionAction

__all__ = ["FileIdentifier", "FileSystemNode", "FileSystemTree", "PermissionAction"]
