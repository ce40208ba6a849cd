"""Unit tests for the SafeWriter class in the icontree CLI."""

import errno
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from icontree.cli.safe_writer import SafeWriter


@pytest.fixture
def mock_signals():
    """Replace the shared signal handler with one reporting no interruption."""
    with patch("icontree.cli.safe_writer.signal_handler") as mock:
        mock.interrupted = False
        yield mock


def test_init_with_fd():
    writer = SafeWriter(3)

    assert writer.file == 3
    assert writer.fd == 3
    assert writer._file_obj is None
    assert not writer._closed


def test_init_with_path(tmp_path):
    path = tmp_path / "tree.txt"
    writer = SafeWriter(path)
    try:
        assert writer.file == path
        assert writer.fd == writer._file_obj.fileno()
        assert path.exists()
    finally:
        writer.close()


def test_init_with_path_string():
    with patch("pathlib.Path.open") as mock_open_func:
        mock_file = MagicMock()
        mock_file.fileno.return_value = 5
        mock_open_func.return_value = mock_file

        writer = SafeWriter("/path/to/tree.txt")

        assert Path(writer.file) == Path("/path/to/tree.txt")
        assert writer.fd == 5
        mock_open_func.assert_called_once_with("w", encoding="utf-8")


def test_write_encodes_utf8(mock_signals):
    with patch("os.write", return_value=len("├── a\n".encode("utf-8"))) as mock_write:
        writer = SafeWriter(3)
        writer.write("├── a\n")

        mock_write.assert_called_once_with(3, "├── a\n".encode("utf-8"))


def test_write_retries_partial_writes(mock_signals):
    with patch("os.write", side_effect=[2, 3]) as mock_write:
        writer = SafeWriter(3)
        writer.write("tree\n")

    assert mock_write.call_count == 2
    assert mock_write.call_args_list[1].args == (3, b"ee\n")


def test_write_after_signal(mock_signals):
    mock_signals.interrupted = True
    writer = SafeWriter(3)

    with patch("os.write") as mock_write:
        with pytest.raises(BrokenPipeError):
            writer.write("test")

    mock_write.assert_not_called()


def test_write_with_epipe(mock_signals):
    with patch("os.write", side_effect=OSError(errno.EPIPE, "Broken pipe")):
        writer = SafeWriter(3)

        with pytest.raises(BrokenPipeError):
            writer.write("test")


def test_write_with_other_os_error(mock_signals):
    with patch("os.write", side_effect=OSError(errno.EIO, "Input/output error")):
        writer = SafeWriter(3)

        with pytest.raises(OSError) as excinfo:
            writer.write("test")

    assert excinfo.value.errno == errno.EIO


def test_close_leaves_descriptor_open():
    with patch("os.close") as mock_close:
        writer = SafeWriter(3)
        writer.close()

    assert writer._closed
    mock_close.assert_not_called()


def test_close_twice_closes_file_once():
    mock_file = MagicMock()
    writer = SafeWriter(3)
    writer._file_obj = mock_file

    writer.close()
    writer.close()

    mock_file.close.assert_called_once()


def test_close_ignores_broken_pipe():
    mock_file = MagicMock()
    mock_file.close.side_effect = OSError(errno.EPIPE, "Broken pipe")
    writer = SafeWriter(3)
    writer._file_obj = mock_file

    writer.close()

    assert writer._closed


def test_close_propagates_other_errors():
    mock_file = MagicMock()
    mock_file.close.side_effect = OSError(errno.EIO, "I/O error")
    writer = SafeWriter(3)
    writer._file_obj = mock_file

    with pytest.raises(OSError) as excinfo:
        writer.close()

    assert excinfo.value.errno == errno.EIO


def test_context_manager_closes_after_exception():
    with pytest.raises(RuntimeError):
        with SafeWriter(3) as writer:
            assert not writer._closed
            raise RuntimeError("boom")

    assert writer._closed


def test_context_manager_keeps_original_exception():
    mock_file = MagicMock()
    mock_file.close.side_effect = OSError(errno.EIO, "I/O error")

    with pytest.raises(RuntimeError):
        with SafeWriter(3) as writer:
            writer._file_obj = mock_file
            raise RuntimeError("boom")


def test_writes_tree_to_file(tmp_path, mock_signals):
    path = tmp_path / "tree.txt"
    lines = ["test\n", "└──  café\n", "0 directories and 0 files\n"]

    with SafeWriter(path) as writer:
        for line in lines:
            writer.write(line)

    assert path.read_text(encoding="utf-8") == "".join(lines)
