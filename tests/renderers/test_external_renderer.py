"""Tests for renderers backed by external commands."""

import shutil
import sys
from unittest.mock import MagicMock, patch

import pytest

from catlr.exceptions import CommandNotFoundError
from catlr.renderers.external_renderer import (
    BAT_ARGUMENTS,
    BAT_INTERACTIVE_ARGUMENTS,
    ExternalFileRenderer,
    ExternalTreeRenderer,
    command_exists,
)

requires_cat = pytest.mark.skipif(shutil.which("cat") is None, reason="cat is not installed")


def fake_process(output_chunks):
    """Build a Popen stand-in whose stdout yields the given chunks."""
    process = MagicMock()
    process.stdout.read.side_effect = list(output_chunks) + [b""]
    process.poll.return_value = 0
    return process


class TestCommandExists:
    def test_checks_first_word_only(self):
        with patch("catlr.renderers.external_renderer.shutil.which", return_value="/usr/bin/lsd") as mock_which:
            assert command_exists("lsd --tree")
        mock_which.assert_called_once_with("lsd")

    def test_missing_command(self):
        with patch("catlr.renderers.external_renderer.shutil.which", return_value=None):
            assert not command_exists("bat")

    def test_blank_command(self):
        assert not command_exists("   ")


class TestExternalFileRenderer:
    @pytest.fixture(autouse=True)
    def installed(self):
        with patch("catlr.renderers.external_renderer.shutil.which", return_value="/usr/bin/tool"):
            yield

    def test_missing_command_raises(self):
        with patch("catlr.renderers.external_renderer.shutil.which", return_value=None):
            with pytest.raises(CommandNotFoundError):
                ExternalFileRenderer("bat")

    def test_bat_gets_paging_and_style_arguments(self):
        renderer = ExternalFileRenderer("bat")
        assert renderer.arguments == ["bat"] + BAT_ARGUMENTS

    def test_bat_forces_color_on_terminal(self):
        renderer = ExternalFileRenderer("bat", interactive=True)
        assert renderer.arguments == ["bat"] + BAT_ARGUMENTS + BAT_INTERACTIVE_ARGUMENTS

    def test_other_commands_are_used_verbatim(self):
        assert ExternalFileRenderer("cat").arguments == ["cat"]
        assert ExternalFileRenderer("batcat --plain").arguments == ["batcat", "--plain"]
        assert ExternalFileRenderer("bat --plain").arguments == ["bat", "--plain"]

    def test_quoted_arguments_are_split_like_a_shell(self):
        renderer = ExternalFileRenderer("pygmentize -O 'style=monokai'")
        assert renderer.arguments == ["pygmentize", "-O", "style=monokai"]

    def test_streams_process_output(self):
        process = fake_process([b"line 1\n", b"line 2\n"])
        with patch("catlr.renderers.external_renderer.subprocess.Popen", return_value=process) as mock_popen:
            output = list(ExternalFileRenderer("cat").render_file("a b.txt"))

        assert output == [b"line 1\n", b"line 2\n"]
        assert mock_popen.call_args.args[0] == ["cat", "a b.txt"]
        process.wait.assert_called_once()

    def test_kills_process_when_consumer_stops_early(self):
        process = fake_process([b"first", b"second"])
        process.poll.return_value = None
        with patch("catlr.renderers.external_renderer.subprocess.Popen", return_value=process):
            chunks = ExternalFileRenderer("cat").render_file("a.txt")
            assert next(chunks) == b"first"
            chunks.close()

        process.kill.assert_called_once()
        process.stdout.close.assert_called_once()
        process.wait.assert_called_once()

    def test_missing_output_pipe_is_an_os_error(self):
        process = fake_process([])
        process.stdout = None
        with patch("catlr.renderers.external_renderer.subprocess.Popen", return_value=process):
            with pytest.raises(OSError, match="No output pipe from 'cat'"):
                list(ExternalFileRenderer("cat").render_file("a.txt"))

        process.kill.assert_called_once()
        process.wait.assert_called_once()

    def test_repr(self):
        assert repr(ExternalFileRenderer("cat")) == "ExternalFileRenderer('cat')"


class TestExternalTreeRenderer:
    @pytest.fixture(autouse=True)
    def installed(self):
        with patch("catlr.renderers.external_renderer.shutil.which", return_value="/usr/bin/tree"):
            yield

    def test_splits_output_into_lines_across_chunks(self):
        process = fake_process([b".\n\xe2\x94\x9c\xe2\x94\x80", b"\xe2\x94\x80 a.txt\n", b"1 file"])
        with patch("catlr.renderers.external_renderer.subprocess.Popen", return_value=process):
            lines = list(ExternalTreeRenderer("tree").render_tree("."))

        assert lines == [".", "├── a.txt", "1 file"]

    def test_invalid_utf8_is_replaced(self):
        process = fake_process([b"bad \xff name\n"])
        with patch("catlr.renderers.external_renderer.subprocess.Popen", return_value=process):
            lines = list(ExternalTreeRenderer("tree").render_tree("."))

        assert lines == ["bad � name"]


@requires_cat
def test_cat_end_to_end(tmp_path):
    target = tmp_path / "hello.txt"
    target.write_bytes(b"hello\nworld\n")

    assert b"".join(ExternalFileRenderer("cat").render_file(target)) == b"hello\nworld\n"


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX command line")
@requires_cat
def test_cat_missing_file_produces_no_output(tmp_path):
    assert b"".join(ExternalFileRenderer("cat").render_file(tmp_path / "missing")) == b""
