"""User configuration for the external presentation commands.

The configuration lives in ``~/.config/catlr/catlr.conf`` and holds one ``key = value``
setting per line. Blank lines, comment lines starting with ``#`` and lines without an
``=`` are skipped; unknown keys are ignored.

Recognized keys:
    treePrintCommand: command used to draw the directory tree (default ``tree``)
    filePrintCommand: command used to print file contents (default ``bat``)

Example configuration::

    # prefer lsd for the tree view
    treePrintCommand = lsd --tree
    filePrintCommand = batcat
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from catlr.exceptions import ConfigError
from catlr.types import PathType

DEFAULT_TREE_COMMAND = "tree"
DEFAULT_FILE_COMMAND = "bat"

CONFIG_KEYS = {
    "treePrintCommand": "tree_command",
    "filePrintCommand": "file_command",
}


@dataclass(frozen=True)
class Config:
    """Commands used to present the tree and file contents.

    Built once at startup and passed explicitly to whatever needs it.

    Attributes:
        tree_command: Command line for drawing the directory tree.
        file_command: Command line for printing a file's contents.
    """

    tree_command: str = DEFAULT_TREE_COMMAND
    file_command: str = DEFAULT_FILE_COMMAND


def get_home_path() -> Optional[Path]:
    """Return the user's home directory, or None if it is not set."""
    home = os.environ.get("USERPROFILE" if os.name == "nt" else "HOME")
    return Path(home) if home else None


def default_config_path() -> Optional[Path]:
    """Return the location of the user configuration file, or None without a home directory."""
    home = get_home_path()
    if home is None:
        return None
    return home / ".config" / "catlr" / "catlr.conf"


def parse_config(text: str, base: Optional[Config] = None) -> Config:
    """Parse configuration text on top of a base configuration.

    Args:
        text: Contents of a configuration file.
        base: Configuration supplying values for keys not present. Defaults to the
            built-in defaults.

    Returns:
        The resulting configuration.

    Example:
        >>> parse_config("# comment\\ntreePrintCommand = lsd --tree\\nbogus line\\n")
        Config(tree_command='lsd --tree', file_command='bat')
    """
    config = base if base is not None else Config()
    for line in text.splitlines():
        if not line or line.startswith("#"):
            continue
        key, separator, value = line.partition("=")
        if not separator:
            continue
        attribute = CONFIG_KEYS.get(key.strip())
        if attribute is not None:
            config = replace(config, **{attribute: value.strip()})
    return config


def load_config(config_path: Optional[PathType] = None) -> Config:
    """Load the configuration file, falling back to defaults when it does not exist.

    Args:
        config_path: Configuration file to read. Defaults to ``~/.config/catlr/catlr.conf``.

    Returns:
        The loaded configuration.

    Raises:
        ConfigError: If the file cannot be read or decoded, or if an explicitly given
            file does not exist.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(str(path), "No such file")
    else:
        default_path = default_config_path()
        if default_path is None or not default_path.exists():
            return Config()
        path = default_path

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as e:
        raise ConfigError(str(path), str(e)) from e
    return parse_config(text)
