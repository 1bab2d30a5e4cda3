"""
Filesystem adapter for the processing pipeline.

This module provides the production implementation of the `IOHandler`
protocol: strict UTF-8 reads that keep line endings intact, a streaming
directory walk that reports unreadable directories instead of aborting, and
atomic in-place rewrites that keep the permissions of the original file.
"""

import os
from pathlib import Path
import shutil
import tempfile
from typing import Iterator

from core.exceptions import FileReadError, FileWriteError
from core.models import WalkEntry


class FilesystemIOHandler:
    """
    IOHandler backed by the local filesystem.

    Attributes:
        encoding: Text encoding used for reads and writes. Defaults to UTF-8.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read_file(self, file_path: Path) -> str:
        """
        Read the text content of a file.

        Decoding is strict: a file that is not valid text in `encoding` is
        reported as unreadable rather than silently altered, since its content
        may be written back. Newlines are returned untranslated.

        Args:
            file_path: The path to the file to read.

        Returns:
            The content of the file.

        Raises:
            FileReadError: If the file cannot be opened, read or decoded.
        """
        try:
            with open(file_path, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise FileReadError(
                message=f"File is not valid {self.encoding} text: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e
        except OSError as e:
            raise FileReadError(
                message=f"Failed to read file: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e

    def walk(self, root: Path) -> Iterator[WalkEntry]:
        """
        Stream every directory and file below `root`, root included.

        Directories are visited top-down, and entries within a directory are
        sorted by name. Symbolic links to directories are not followed.

        Directories that cannot be listed are yielded as entries with `error`
        set, and the walk goes on with the rest of the tree.

        Args:
            root: The directory to walk.

        Yields:
            WalkEntry: One per visited path.
        """
        errors: list[OSError] = []

        for dirpath, dirnames, filenames in os.walk(root, onerror=errors.append):
            yield from self._drain_errors(errors)

            current = Path(dirpath)
            yield WalkEntry(current, is_dir=True)

            # Sorting in place also fixes the order os.walk descends in
            dirnames.sort()
            for name in sorted(filenames):
                yield WalkEntry(current / name, is_dir=False)

        yield from self._drain_errors(errors)

    def write_file(self, file_path: Path, content: str) -> None:
        """
        Atomically replace the content of a file.

        The new content is written to a temporary file next to the target, which
        then takes the place of the original through `os.replace`. The original
        file's permission bits are kept. Symbolic links are resolved first, so
        the file they point to is updated and the link itself is left alone.
        Hard links to the original file are not carried over to the new one.

        Args:
            file_path: The path to the file to overwrite.
            content: The new content.

        Raises:
            FileWriteError: If the content cannot be written or moved into place,
                including when the parent directory does not exist.
        """
        tmp_path: str | None = None
        try:
            target = Path(file_path).resolve()
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
            with os.fdopen(fd, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
            if target.exists():
                shutil.copymode(target, tmp_path)
            os.replace(tmp_path, target)
            tmp_path = None
        except OSError as e:
            raise FileWriteError(
                message=f"Failed to write to file: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e
        finally:
            if tmp_path is not None:
                Path(tmp_path).unlink(missing_ok=True)

    @staticmethod
    def _drain_errors(errors: list[OSError]) -> Iterator[WalkEntry]:
        while errors:
            error = errors.pop(0)
            path = Path(error.filename) if error.filename else Path()
            yield WalkEntry(path, is_dir=True, error=error)
