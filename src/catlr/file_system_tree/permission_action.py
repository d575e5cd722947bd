"""Permission action enum for handling permission errors while walking a directory."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be read during the tree walk or content dump.

    Values:
        IGNORE: Keep going, leaving the unreadable directory empty (default behavior)
        RAISE: Raise a PermissionError as soon as a directory cannot be listed
    """

    IGNORE = "ignore"
    RAISE = "raise"
