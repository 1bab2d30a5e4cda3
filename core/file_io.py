from pathlib import Path
from typing import Iterable, Iterator, Mapping, Protocol

from core.exceptions import FileReadError, FileWriteError
from core.models import WalkEntry


class IOHandler(Protocol):
    """
    Protocol defining the file operations the processing pipeline relies on.

    The pipeline never touches the filesystem directly, allowing different
    implementations for production (filesystem) and testing (in-memory fake).
    """

    def read_file(self, file_path: Path) -> str:
        """
        Read the whole text content of a file.

        Args:
            file_path: The path to the file to read.

        Returns:
            The file content, with line endings untouched.

        Raises:
            FileReadError: If the file cannot be read or decoded.
        """

    def walk(self, root: Path) -> Iterator[WalkEntry]:
        """
        Walk the tree rooted at `root`, yielding one entry per file or directory,
        the root included.

        Traversal errors do not stop the walk: the failing path is yielded as an
        entry with its `error` set, and the walk continues with the remaining
        entries.

        Args:
            root: The directory to walk.

        Yields:
            WalkEntry for every visited path.
        """

    def write_file(self, file_path: Path, content: str) -> None:
        """
        Replace the whole content of a file.

        Args:
            file_path: The path to the file to overwrite.
            content: The new content.

        Raises:
            FileWriteError: If the content cannot be persisted.
        """


class MockIOHandler:
    """
    In-memory implementation of IOHandler for testing.

    Serves file contents from a mapping and lets tests inject read, write and
    traversal errors for specific paths, without touching the filesystem.

    Paths are compared by their string form, so both `Path` and `str` keys work.
    """

    def __init__(
        self,
        files: Mapping[str | Path, str] | None = None,
        walk_paths: Iterable[str | Path] | None = None,
        directories: Iterable[str | Path] | None = None,
        read_errors: Iterable[str | Path] | None = None,
        write_errors: Iterable[str | Path] | None = None,
        walk_errors: Iterable[str | Path] | None = None,
    ):
        """
        Initialize MockIOHandler with in-memory files and injected failures.

        Args:
            files: Mapping of file path to content, returned by read_file().
            walk_paths: Paths yielded by walk(), in order, after the root. If None,
                the keys of `files` are walked.
            directories: Paths among the walked ones that are directories.
            read_errors: Paths for which read_file() raises FileReadError.
            write_errors: Paths for which write_file() raises FileWriteError.
            walk_errors: Paths that walk() yields with an error attached.

        Attributes (for test inspection):
            read_file_calls: List of paths passed to read_file()
            write_file_calls: List of tuples (path, content) passed to write_file()
            walk_calls: List of roots passed to walk()
            written: Mapping of path to the last content written to it
        """
        self.files = {str(k): v for k, v in (files or {}).items()}
        self.walk_paths = (
            [str(p) for p in walk_paths] if walk_paths is not None else list(self.files)
        )
        self.directories = {str(p) for p in directories or ()}
        self.read_errors = {str(p) for p in read_errors or ()}
        self.write_errors = {str(p) for p in write_errors or ()}
        self.walk_errors = {str(p) for p in walk_errors or ()}

        # Track calls for test inspection
        self.read_file_calls: list[Path] = []
        self.write_file_calls: list[tuple[Path, str]] = []
        self.walk_calls: list[Path] = []
        self.written: dict[str, str] = {}

    def read_file(self, file_path: Path) -> str:
        self.read_file_calls.append(Path(file_path))
        key = str(file_path)
        if key in self.read_errors:
            raise FileReadError(
                message=f"Failed to read file: {file_path}",
                file_path=key,
                original_exception=PermissionError(key),
            )
        if key not in self.files:
            raise FileReadError(
                message=f"Failed to read file: {file_path}",
                file_path=key,
                original_exception=FileNotFoundError(key),
            )
        return self.files[key]

    def walk(self, root: Path) -> Iterator[WalkEntry]:
        self.walk_calls.append(Path(root))
        yield WalkEntry(Path(root), is_dir=True)
        for path in self.walk_paths:
            error = OSError(f"cannot access {path}") if path in self.walk_errors else None
            yield WalkEntry(Path(path), is_dir=path in self.directories, error=error)

    def write_file(self, file_path: Path, content: str) -> None:
        self.write_file_calls.append((Path(file_path), content))
        key = str(file_path)
        if key in self.write_errors:
            raise FileWriteError(
                message=f"Failed to write to file: {file_path}",
                file_path=key,
                original_exception=PermissionError(key),
            )
        self.written[key] = content
        self.files[key] = content
