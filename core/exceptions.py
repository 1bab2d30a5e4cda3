"""
Custom exception classes for the license header checker.

This module defines the application-specific exceptions raised while reading
the canonical license, walking the source tree and rewriting files. They carry
structured information (the offending path and the underlying exception) so
the command-line layer can explain what went wrong.
"""

from typing import Optional


class FileIOError(Exception):
    """
    Base exception for file I/O errors.

    Attributes:
        message: A human-readable error message describing what went wrong.
        file_path: The path of the file involved in the failed operation, if known.
        original_exception: The underlying exception that caused this error, if any.
    """

    default_message = "An error occurred during file I/O operation"

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.file_path = file_path
        self.original_exception = original_exception


class FileReadError(FileIOError):
    """
    Raised when the content of a file cannot be read.

    This covers OS level failures (missing file, permissions) as well as files
    that are not valid UTF-8, which are never rewritten.
    """

    default_message = "Failed to read file"


class FileWriteError(FileIOError):
    """Raised when the new content of a file cannot be persisted."""

    default_message = "Failed to write file"


class LicenseReadError(FileIOError):
    """
    Raised when the canonical license header cannot be loaded.

    This is the only error that aborts a whole run: without the canonical header
    no file can be classified, so no traversal takes place.
    """

    default_message = "Failed to read the license header file"
