"""
Per-file classification.

Decides what to do with a single, already-read file and, when the options ask
for it, rewrites the file through the injected I/O handler.
"""

from pathlib import Path

from core.exceptions import FileWriteError
from core.file_io import IOHandler
from core.header_matcher import contains_license_header
from core.header_transformer import insert_header, replace_header
from core.models import Action, Options


def process_file(
    path: Path,
    content: str,
    license_text: str,
    options: Options,
    io_handler: IOHandler,
) -> Action:
    """
    Classify one file and apply the requested change, if any.

    The checks run in a fixed order:

    1. The content already contains the canonical header verbatim: LICENSE_OK.
       This check comes first so a correct header is never mistaken for a
       different one by the header heuristics.
    2. The header comment mentions a license: replaced if `options.replace`,
       otherwise SKIPPED_REPLACE.
    3. No license header at all: inserted if `options.add`, otherwise
       SKIPPED_ADD.

    At most one write is issued, and the file is never read again.

    Args:
        path: Path of the file, used for the write and for reporting.
        content: Current content of the file.
        license_text: Canonical license header.
        options: Run options.
        io_handler: Handler used to persist the new content.

    Returns:
        The resulting Action. OPERATION_ERROR if persisting the change failed.
    """
    if license_text.strip() in content:
        return Action.LICENSE_OK

    if contains_license_header(content, options.header_regex):
        if not options.replace:
            return Action.SKIPPED_REPLACE
        new_content = replace_header(content, license_text, options.header_regex)
        return _persist(path, new_content, io_handler, Action.LICENSE_REPLACED)

    if not options.add:
        return Action.SKIPPED_ADD
    new_content = insert_header(content, license_text)
    return _persist(path, new_content, io_handler, Action.LICENSE_ADDED)


def _persist(
    path: Path, content: str, io_handler: IOHandler, on_success: Action
) -> Action:
    try:
        io_handler.write_file(path, content)
    except FileWriteError:
        return Action.OPERATION_ERROR
    return on_success
