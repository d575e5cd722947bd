"""File identifier for recognizing the same file by device and inode."""

import os
import stat
from typing import Any, Optional

from catlr.types import PathType


class FileIdentifier:
    """Identifies a file by its device and inode numbers.

    Used to recognize when a file about to be printed is the very file that standard
    output is redirected to (``catlr > listing.txt`` run inside the listed directory).
    Printing it would feed the output back into itself.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.

    Example:
        >>> FileIdentifier(1, 2) == FileIdentifier(1, 2)
        True
        >>> FileIdentifier(1, 2) == FileIdentifier(1, 3)
        False
    """

    def __init__(self, device_id: int, inode_number: int):
        self.device_id = device_id
        self.inode_number = inode_number

    @classmethod
    def from_path(cls, path: PathType) -> Optional["FileIdentifier"]:
        """Identify the file at ``path``, following symlinks.

        Returns:
            The identifier, or None if the file cannot be stat'ed.
        """
        try:
            stat_info = os.stat(path)
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)

    @classmethod
    def for_redirected_output(cls, fd: int) -> Optional["FileIdentifier"]:
        """Identify the regular file an output descriptor is redirected to.

        Terminals, pipes and sockets cannot be part of a directory listing, so only a
        descriptor that refers to a regular file yields an identifier.

        Args:
            fd: Output file descriptor, usually that of standard output.

        Returns:
            The identifier, or None if the descriptor is a terminal, is not a regular
            file, or cannot be stat'ed.
        """
        try:
            if os.isatty(fd):
                return None
            stat_info = os.fstat(fd)
        except OSError:
            return None
        if not stat.S_ISREG(stat_info.st_mode):
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileIdentifier):
            return False
        return self.device_id == other.device_id and self.inode_number == other.inode_number

    def __hash__(self) -> int:
        return hash((self.device_id, self.inode_number))

    def __repr__(self) -> str:
        return f"FileIdentifier(device_id={self.device_id}, inode_number={self.inode_number})"
