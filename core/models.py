"""
Core data models for the license header pipeline.

This module defines the vocabulary shared by every stage of a run: the
classification outcome of a file (`Action`), the unit passed from workers to
the aggregator (`Operation`), the immutable run configuration (`Options`) and
the entries produced while walking a directory tree (`WalkEntry`).
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
import re

from constants import DEFAULT_HEADER_REGEX


class Action(Enum):
    """
    Classification outcome for a single file.

    The value of each member is the bucket name used when reporting results.

    Attributes:
        SKIPPED_ADD: The file had no license header, but adding was not requested.
        SKIPPED_REPLACE: The file had a different license header, but replacing
            was not requested.
        LICENSE_OK: The file already contains the canonical header. Untouched.
        LICENSE_ADDED: The canonical header was inserted at the top of the file.
        LICENSE_REPLACED: The existing header was replaced by the canonical one.
        OPERATION_ERROR: The file could not be read, walked or written.
    """

    SKIPPED_ADD = "skipped_add"
    SKIPPED_REPLACE = "skipped_replace"
    LICENSE_OK = "license_ok"
    LICENSE_ADDED = "license_added"
    LICENSE_REPLACED = "license_replaced"
    OPERATION_ERROR = "error"


@dataclass(frozen=True)
class Operation:
    action: Action
    path: Path


@dataclass(frozen=True)
class Options:
    """
    Immutable configuration of a processing run.

    Attributes:
        add: Insert the canonical header in files that have none.
        replace: Replace a header that mentions a license but is not the
            canonical one.
        path: Root of the directory tree to scan.
        license_path: Path to the file holding ONLY the canonical header.
        extensions: Dot-prefixed suffixes of the files to process (e.g. ".js").
        ignore_paths: Folder names, file names or relative path fragments to skip.
            Matched on whole path segments, never as substrings.
        header_regex: Pattern locating the header comment. If it defines a
            `header` group, only that group is considered the header.
        max_workers: Upper bound on file tasks running or queued at once. None
            falls back to `DEFAULT_MAX_WORKERS`.
    """

    add: bool = False
    replace: bool = False
    path: Path = Path(".")
    license_path: Path = Path("license.txt")
    extensions: tuple[str, ...] = ()
    ignore_paths: tuple[str, ...] = ()
    header_regex: re.Pattern[str] = DEFAULT_HEADER_REGEX
    max_workers: int | None = None


@dataclass(frozen=True)
class WalkEntry:
    """
    One entry visited while walking a directory tree.

    Attributes:
        path: Path of the entry, rooted at the walked directory.
        is_dir: True if the entry is a directory.
        error: The error the traversal reported for this path, if any. When set,
            the entry could not be visited (e.g. an unreadable directory).
    """

    path: Path
    is_dir: bool = False
    error: OSError | None = None
