"""
Application-wide constants and configuration defaults.

This module defines the heuristics and tunables used throughout the license
header checker: the default regular expression that locates a header comment,
the keywords that identify a comment as a license, and the sizing of the
concurrent processing pipeline.
"""

import os
import re
from typing import Final

APP_NAME: Final[str] = "license-header-checker"
APP_VERSION: Final[str] = "1.0.0"

# Default pattern used to locate the header comment of a file.
# The match is anchored at the start of the file and may skip blank lines and
# single-line directives (Go build tags, shebangs) before the block comment.
# Those directives are outside the `header` group, so they survive a replace.
# The block comment itself is matched lazily: the first `*/` closes it, even if
# more block comments follow further down the file.
DEFAULT_HEADER_PATTERN: Final[str] = (
    r"\A(?:[ \t]*(?://|#!)[^\n]*\n|[ \t]*\r?\n)*[ \t]*(?P<header>/\*.*?\*/)"
)

DEFAULT_HEADER_REGEX: Final[re.Pattern[str]] = re.compile(
    DEFAULT_HEADER_PATTERN, re.DOTALL
)

# Name of the regex group that delimits the header inside a match. Patterns
# without this group treat the whole match as the header.
HEADER_GROUP: Final[str] = "header"

# A header comment containing any of these words (case-insensitive) is
# considered *a* license header, even if it is not the canonical one.
LICENSE_KEYWORDS: Final[frozenset[str]] = frozenset({"copyright", "license"})

# Capacity of the queue that carries finished operations from the workers to
# the aggregator. Producers block when it is full.
RESULT_QUEUE_SIZE: Final[int] = 15

# Same default ThreadPoolExecutor uses for I/O bound work.
DEFAULT_MAX_WORKERS: Final[int] = min(32, (os.cpu_count() or 1) + 4)
