"""
General utility functions for the CLI application.
"""

from typing import Iterable

from rich.console import Console

console: Console = Console()
err_console: Console = Console(stderr=True)


def normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    """
    Turn user supplied extensions into dot-prefixed suffixes.

    Both "js" and ".js" become ".js". Blank entries are dropped and duplicates
    are removed, keeping the first occurrence.

    Args:
        extensions: Extensions as typed on the command line.

    Returns:
        tuple[str, ...]: The normalized extensions, in their original order.
    """
    normalized: list[str] = []
    for ext in extensions:
        ext = ext.strip()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in normalized:
            normalized.append(ext)
    return tuple(normalized)


def split_comma_separated(value: str | None) -> tuple[str, ...]:
    """Split "a,b,,c" into ("a", "b", "c"), ignoring empty items."""
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())
