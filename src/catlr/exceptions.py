class ConfigError(Exception):
    """
    Exception raised when the configuration file exists but cannot be read.

    A missing default configuration file is not an error; the defaults are used instead.
    This exception covers files that are present but unreadable (permissions, a directory
    in place of the file, undecodable content) and explicitly requested files that do not
    exist.

    Attributes:
        config_path (str): Path to the configuration file that failed to load.

    Example:
        >>> error = ConfigError("/home/user/.config/catlr/catlr.conf", "Permission denied")
        >>> str(error)
        'Could not read configuration file /home/user/.config/catlr/catlr.conf: Permission denied'
    """

    def __init__(self, config_path: str, reason: str) -> None:
        """
        Initialize the exception with the offending path and the underlying reason.

        Args:
            config_path (str): Path to the configuration file.
            reason (str): Description of the underlying failure.
        """
        self.config_path = config_path
        super().__init__(f"Could not read configuration file {config_path}: {reason}")


class CommandNotFoundError(Exception):
    """
    Exception raised when an external renderer is created for a command that is not on PATH.

    Renderer selection checks availability first and falls back to the built-in renderers,
    so this is only seen when an external renderer is constructed directly.

    Attributes:
        command (str): The command line whose executable could not be found.

    Example:
        >>> error = CommandNotFoundError("bat --paging=never")
        >>> str(error)
        "Command not found: 'bat'"
    """

    def __init__(self, command: str) -> None:
        """
        Initialize the exception with the command that could not be found.

        Args:
            command (str): The full command line. Only its first word is reported.
        """
        self.command = command
        executable = command.split(" ", 1)[0] if command else command
        super().__init__(f"Command not found: '{executable}'")
