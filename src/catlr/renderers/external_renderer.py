"""Renderers that delegate presentation to external command-line tools.

The configured command is split with shell-like quoting rules and run with the target
path appended as its last argument. Its standard output is streamed back to the caller;
its standard error is inherited so that diagnostics from the tool reach the user.
"""

import shlex
import shutil
import subprocess
from typing import Iterator, List, Sequence

from catlr.exceptions import CommandNotFoundError
from catlr.types import PathType

from .base_renderer import FileRenderer, TreeRenderer

# Extra arguments for the default pager so it prints once and keeps its decorations
BAT_ARGUMENTS = ["--paging=never", "--style=full"]
BAT_INTERACTIVE_ARGUMENTS = ["--color=always", "--decorations=always"]


def command_exists(command: str) -> bool:
    """Check whether the executable of a command line is available on PATH.

    Only the first word is checked, so commands with arguments such as ``"lsd --tree"``
    are supported.

    Args:
        command: Command line as written in the configuration.

    Returns:
        True if the executable can be found, False otherwise (including for an empty
        command).

    Example:
        >>> command_exists("")
        False
        >>> command_exists("surely-not-an-installed-tool --flag")
        False
    """
    words = command.split()
    if not words:
        return False
    return shutil.which(words[0]) is not None


class ExternalCommandRenderer:
    """Runs an external command for a path and streams its standard output.

    Attributes:
        command (str): The command line as configured.
        arguments (List[str]): The split command line, without the target path.
        chunk_size (int): Number of bytes read from the process per chunk.

    Raises:
        CommandNotFoundError: If the command's executable is not on PATH.
        ValueError: If the command line has unbalanced quotes.
    """

    def __init__(self, command: str, extra_arguments: Sequence[str] = (), chunk_size: int = 65536) -> None:
        if not command_exists(command):
            raise CommandNotFoundError(command)
        self.command = command
        self.arguments: List[str] = shlex.split(command) + list(extra_arguments)
        self.chunk_size = chunk_size

    def _stream_output(self, path: PathType) -> Iterator[bytes]:
        process = subprocess.Popen(self.arguments + [str(path)], stdout=subprocess.PIPE)
        if process.stdout is None:
            process.kill()
            process.wait()
            raise OSError(f"No output pipe from {self.command!r}")
        try:
            while True:
                chunk = process.stdout.read(self.chunk_size)
                if not chunk:
                    break
                yield chunk
        finally:
            # The consumer may stop early (e.g. on a broken pipe)
            if process.poll() is None:
                process.kill()
            process.stdout.close()
            process.wait()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.command!r})"


class ExternalTreeRenderer(ExternalCommandRenderer, TreeRenderer):
    """Draws the directory tree with an external tool such as ``tree``.

    External tools know nothing about catlr's filters, so this renderer is only chosen
    when the listing axis has no rules.
    """

    def render_tree(self, path: PathType) -> Iterator[str]:
        buffer = b""
        for chunk in self._stream_output(path):
            buffer += chunk
            *lines, buffer = buffer.split(b"\n")
            for line in lines:
                yield line.decode("utf-8", errors="replace")
        if buffer:
            yield buffer.decode("utf-8", errors="replace")


class ExternalFileRenderer(ExternalCommandRenderer, FileRenderer):
    """Prints file contents with an external tool such as ``bat`` or ``cat``.

    When the command is exactly ``bat``, paging is disabled and the full decoration style
    is requested. Because the output is captured through a pipe, colors and decorations
    are forced on for ``bat`` when catlr itself writes to a terminal.

    Example:
        >>> renderer = ExternalFileRenderer("cat")  # doctest: +SKIP
        >>> b"".join(renderer.render_file("README.md"))  # doctest: +SKIP
        b'# catlr\\n...'
    """

    def __init__(self, command: str, interactive: bool = False, chunk_size: int = 65536) -> None:
        extra_arguments: List[str] = []
        if command == "bat":
            extra_arguments = BAT_ARGUMENTS + (BAT_INTERACTIVE_ARGUMENTS if interactive else [])
        super().__init__(command, extra_arguments, chunk_size=chunk_size)

    def render_file(self, path: PathType) -> Iterator[bytes]:
        yield from self._stream_output(path)
