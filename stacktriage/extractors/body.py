"""Find where a method body closes by counting braces on scrubbed lines."""

import logging

from .scrubber import TextBlockState, brace_delta, scrub_line

logger = logging.getLogger(__name__)


def is_bodyless(signature_line: str) -> bool:
    """Abstract and interface methods end in ``;`` without opening a body."""
    scrubbed = scrub_line(signature_line, TextBlockState())
    return scrubbed.rstrip().endswith(";") and "{" not in scrubbed


def resolve_body_end(lines: list[str], signature_end: int) -> int:
    """Return the index of the line closing the body opened at ``signature_end``.

    Unbalanced input never raises: a body still open at end of file runs to
    the last line, and a signature that never opens a body ends where it is.
    """
    if is_bodyless(lines[signature_end]):
        return signature_end

    state = TextBlockState()
    depth = 0
    opened = False

    for index in range(signature_end, len(lines)):
        scrubbed = scrub_line(lines[index], state)
        if "{" in scrubbed:
            opened = True
        depth += brace_delta(scrubbed)
        if opened and depth <= 0:
            return index

    if not opened:
        return signature_end

    logger.debug(
        "Body opened at line %d is never closed, extending to end of file",
        signature_end + 1,
    )
    return len(lines) - 1
