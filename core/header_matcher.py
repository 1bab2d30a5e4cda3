"""
Header comment detection.

Locates the header comment at the top of a file and decides whether it looks
like a license. Detection is a heuristic: any header mentioning "copyright" or
"license" counts as a license header, whether or not it is the canonical one.
"""

import re

from constants import DEFAULT_HEADER_REGEX, HEADER_GROUP, LICENSE_KEYWORDS


def find_header(
    content: str, header_regex: re.Pattern[str] = DEFAULT_HEADER_REGEX
) -> tuple[int, int] | None:
    """
    Locate the header comment of a file.

    Only the first match of `header_regex` is considered. If the pattern has a
    named group `header`, the span of that group is returned, so whatever the
    pattern matched before it (build tags, shebangs, blank lines) is left out
    of the header.

    Args:
        content: Full text of the file.
        header_regex: Compiled pattern identifying the header comment.

    Returns:
        The (start, end) offsets of the header within `content`, or None if the
        file has no header comment.
    """
    match = header_regex.search(content)
    if match is None:
        return None
    if HEADER_GROUP in header_regex.groupindex:
        start, end = match.span(HEADER_GROUP)
        if start < 0:
            return None
        return start, end
    return match.span()


def extract_header(
    content: str, header_regex: re.Pattern[str] = DEFAULT_HEADER_REGEX
) -> str:
    """
    Return the first header comment of the content, or "" if there is none.
    """
    span = find_header(content, header_regex)
    if span is None:
        return ""
    start, end = span
    return content[start:end]


def contains_license_header(
    content: str, header_regex: re.Pattern[str] = DEFAULT_HEADER_REGEX
) -> bool:
    """
    Check whether the header comment of the content mentions a license.

    Args:
        content: Full text of the file.
        header_regex: Compiled pattern identifying the header comment.

    Returns:
        True if the lower-cased header contains "copyright" or "license".
    """
    header = extract_header(content, header_regex).lower()
    return any(keyword in header for keyword in LICENSE_KEYWORDS)
