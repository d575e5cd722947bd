"""Directory tree and file content listing utilities.

This package provides tools for displaying a directory tree followed by the
contents of the files inside it, with include/exclude filtering applied to
both the listing and the printed contents.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("catlr")
except PackageNotFoundError:
    __version__ = "unknown"
