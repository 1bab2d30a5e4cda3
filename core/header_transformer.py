"""
Header text surgery: inserting the canonical header or swapping it in place of
an existing one.
"""

import re

from constants import DEFAULT_HEADER_REGEX
from core.header_matcher import find_header


def insert_header(content: str, header: str) -> str:
    """
    Put the header at the top of the content, followed by one blank line.

    Leading empty lines of the content are dropped; the rest is kept as is.
    """
    return header.strip() + "\n\n" + content.lstrip("\r\n")


def replace_header(
    content: str, header: str, header_regex: re.Pattern[str] = DEFAULT_HEADER_REGEX
) -> str:
    """
    Substitute the existing header comment with the given header.

    The substitution happens in place: text before the existing header (e.g. a
    build tag line) and text after it are preserved byte for byte.

    Args:
        content: Full text of the file.
        header: The canonical header. Surrounding whitespace is stripped.
        header_regex: Compiled pattern identifying the existing header.

    Returns:
        The new content, or the original content if no header was found.
    """
    span = find_header(content, header_regex)
    if span is None:
        return content
    start, end = span
    return content[:start] + header.strip() + content[end:]
