"""
Tests for the filesystem adapter using pytest.

Tests cover:
- FilesystemIOHandler.read_file: UTF-8 reads, untranslated newlines, decode and OS errors
- FilesystemIOHandler.walk: ordering, root entry, unreadable directories
- FilesystemIOHandler.write_file: atomic replacement, kept permissions, failures
"""

import os
from pathlib import Path
import stat

import pytest

from adapters.filesystem import FilesystemIOHandler
from core.exceptions import FileReadError, FileWriteError
from core.models import WalkEntry


# ============================================================================
# Tests for FilesystemIOHandler.read_file
# ============================================================================


@pytest.mark.integration
def test_read_file_success(tmp_path):
    """Should read the text content of a file."""
    file_path = tmp_path / "index.js"
    file_path.write_text("/* héllo */\ncode();\n", encoding="utf-8")

    assert FilesystemIOHandler().read_file(file_path) == "/* héllo */\ncode();\n"


@pytest.mark.integration
def test_read_file_keeps_crlf(tmp_path):
    """Should return Windows line endings untranslated."""
    file_path = tmp_path / "index.js"
    file_path.write_bytes(b"line1\r\nline2\r\n")

    assert FilesystemIOHandler().read_file(file_path) == "line1\r\nline2\r\n"


@pytest.mark.integration
def test_read_file_invalid_utf8(tmp_path):
    """Should reject content that is not valid UTF-8."""
    file_path = tmp_path / "binary.js"
    file_path.write_bytes(b"\xff\xfe\x00binary")

    with pytest.raises(FileReadError, match="not valid utf-8") as exc_info:
        FilesystemIOHandler().read_file(file_path)

    assert isinstance(exc_info.value.original_exception, UnicodeDecodeError)
    assert exc_info.value.file_path == str(file_path)


@pytest.mark.integration
def test_read_file_missing(tmp_path):
    """Should raise FileReadError for a file that does not exist."""
    file_path = tmp_path / "missing.js"

    with pytest.raises(FileReadError, match="Failed to read file") as exc_info:
        FilesystemIOHandler().read_file(file_path)

    assert isinstance(exc_info.value.original_exception, FileNotFoundError)


@pytest.mark.integration
def test_read_file_directory(tmp_path):
    """Should raise FileReadError when the path is a directory."""
    with pytest.raises(FileReadError):
        FilesystemIOHandler().read_file(tmp_path)


# ============================================================================
# Tests for FilesystemIOHandler.walk
# ============================================================================


@pytest.mark.integration
def test_walk_yields_root_dirs_and_sorted_files(tmp_path):
    """Should visit directories top-down with their files sorted by name."""
    (tmp_path / "b").mkdir()
    (tmp_path / "a").mkdir()
    (tmp_path / "z.js").write_text("z")
    (tmp_path / "m.js").write_text("m")
    (tmp_path / "a" / "inner.js").write_text("i")
    (tmp_path / "b" / "other.js").write_text("o")

    entries = list(FilesystemIOHandler().walk(tmp_path))

    assert entries == [
        WalkEntry(tmp_path, is_dir=True),
        WalkEntry(tmp_path / "m.js"),
        WalkEntry(tmp_path / "z.js"),
        WalkEntry(tmp_path / "a", is_dir=True),
        WalkEntry(tmp_path / "a" / "inner.js"),
        WalkEntry(tmp_path / "b", is_dir=True),
        WalkEntry(tmp_path / "b" / "other.js"),
    ]


@pytest.mark.integration
def test_walk_missing_root(tmp_path):
    """Should report a root that cannot be listed as a failing entry."""
    root = tmp_path / "missing"

    entries = list(FilesystemIOHandler().walk(root))

    assert len(entries) == 1
    assert entries[0].path == root
    assert isinstance(entries[0].error, FileNotFoundError)


@pytest.mark.integration
@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="directory permissions are not enforced for root",
)
def test_walk_unreadable_directory_continues(tmp_path):
    """Should report an unreadable directory and keep walking the rest."""
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "hidden.js").write_text("h")
    (tmp_path / "visible.js").write_text("v")
    locked.chmod(0)

    try:
        entries = list(FilesystemIOHandler().walk(tmp_path))
    finally:
        locked.chmod(stat.S_IRWXU)

    errors = [entry for entry in entries if entry.error is not None]
    assert [entry.path for entry in errors] == [locked]
    assert WalkEntry(tmp_path / "visible.js") in entries
    assert all(entry.path != locked / "hidden.js" for entry in entries)


# ============================================================================
# Tests for FilesystemIOHandler.write_file
# ============================================================================


@pytest.mark.integration
def test_write_file_replaces_content(tmp_path):
    """Should overwrite the file and leave no temporary file behind."""
    file_path = tmp_path / "index.js"
    file_path.write_text("old content\n")

    FilesystemIOHandler().write_file(file_path, "new content\r\n")

    assert file_path.read_bytes() == b"new content\r\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["index.js"]


@pytest.mark.integration
def test_write_file_through_symlink(tmp_path):
    """Should update the file a symlink points to and keep the link."""
    real = tmp_path / "real.js"
    real.write_text("code();\n")
    link = tmp_path / "link.js"
    link.symlink_to(real)

    FilesystemIOHandler().write_file(link, "/* Copyright */\n\ncode();\n")

    assert link.is_symlink()
    assert link.resolve() == real.resolve()
    assert real.read_text() == "/* Copyright */\n\ncode();\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["link.js", "real.js"]


@pytest.mark.integration
def test_write_file_keeps_permissions(tmp_path):
    """Should keep the permission bits of the original file."""
    file_path = tmp_path / "run.sh"
    file_path.write_text("echo hi\n")
    file_path.chmod(0o755)

    FilesystemIOHandler().write_file(file_path, "# Copyright\necho hi\n")

    assert stat.S_IMODE(file_path.stat().st_mode) == 0o755


@pytest.mark.integration
def test_write_file_missing_parent(tmp_path):
    """Should raise FileWriteError when the parent directory does not exist."""
    file_path = tmp_path / "missing" / "index.js"

    with pytest.raises(FileWriteError, match="Failed to write to file") as exc_info:
        FilesystemIOHandler().write_file(file_path, "content")

    assert isinstance(exc_info.value.original_exception, OSError)
    assert exc_info.value.file_path == str(file_path)


@pytest.mark.integration
def test_write_file_cleans_up_on_failure(tmp_path, mocker):
    """Should remove the temporary file when moving it into place fails."""
    file_path = tmp_path / "index.js"
    file_path.write_text("old\n")
    mocker.patch("adapters.filesystem.os.replace", side_effect=OSError("disk full"))

    with pytest.raises(FileWriteError):
        FilesystemIOHandler().write_file(file_path, "new\n")

    assert file_path.read_text() == "old\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["index.js"]
