"""
Path eligibility rules.

Decides which entries of the walked tree are candidates for processing: a file
is eligible when its extension is one of the configured ones and no ignore
entry matches its path.
"""

from pathlib import PurePath
from typing import Iterable


def is_extension_eligible(path: PurePath, extensions: Iterable[str]) -> bool:
    """
    Check whether the final suffix of a path is one of the given extensions.

    The comparison is exact and case-sensitive: "file.cpp.bak" is not eligible
    for ".cpp", and ".CPP" does not match ".cpp".

    The suffix is `PurePath.suffix`, which is empty for a name starting with
    its only dot: a file named ".js" has no extension and is never eligible,
    although the text after its last dot is "js".

    Args:
        path: The path to check.
        extensions: Dot-prefixed extensions (e.g. ".js", ".go").

    Returns:
        True if the suffix equals one of the extensions.
    """
    suffix = PurePath(path).suffix
    if not suffix:
        return False
    return any(suffix == ext for ext in extensions)


def should_ignore(path: PurePath, ignore_paths: Iterable[str] | None) -> bool:
    """
    Check whether any ignore entry matches the path on segment boundaries.

    An entry matches when its own segments appear, adjacent and in order,
    somewhere in the segments of the path. "test" matches "src/test/a.cpp" but
    not "src/mytest/a.cpp"; "client/assets" matches "client/assets/index.js" but
    not "webclient/assets/index.js".

    Args:
        path: The path to check.
        ignore_paths: Folder names, file names or relative path fragments.
            Empty entries are skipped.

    Returns:
        True if at least one entry matches.
    """
    if not ignore_paths:
        return False

    path_segments = PurePath(path).parts
    for ignore_path in ignore_paths:
        needle = PurePath(ignore_path).parts if ignore_path else ()
        if needle and _contains_segments(path_segments, needle):
            return True
    return False


def _contains_segments(segments: tuple[str, ...], needle: tuple[str, ...]) -> bool:
    size = len(needle)
    for i in range(len(segments) - size + 1):
        if segments[i : i + size] == needle:
            return True
    return False
