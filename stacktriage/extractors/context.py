"""Resolve the code context of a target line: its enclosing method or a window."""

import logging

from .body import resolve_body_end
from .models import CodeContext, MethodBoundaries
from .signature import iter_signatures, merge_annotations

logger = logging.getLogger(__name__)

# Lines kept on each side of the target when no method encloses it
FALLBACK_RADIUS = 50


def split_lines(file_text: str) -> list[str]:
    return file_text.split("\n")


def fallback_window(
    lines: list[str],
    target_index: int,
    radius: int = FALLBACK_RADIUS,
) -> tuple[int, int]:
    """Symmetric window of ``radius`` lines around the target, clamped to the file."""
    start = max(0, target_index - radius)
    end = min(len(lines) - 1, target_index + radius)
    return start, end


def find_method_boundaries(lines: list[str], target_index: int) -> MethodBoundaries | None:
    """Locate the method enclosing ``lines[target_index]``.

    Signatures are tried nearest first. Methods that close before the target,
    such as one declared in an anonymous or local class above it, are passed
    over. Returns 1-based line numbers, or None when no method spans the
    target.
    """
    for signature_start, signature_end in iter_signatures(lines, target_index):
        method_start = merge_annotations(lines, signature_start)
        method_end = resolve_body_end(lines, signature_end)

        boundaries = MethodBoundaries(method_start + 1, method_end + 1)
        if boundaries.contains(target_index + 1):
            return boundaries
        logger.debug(
            "Method at lines %d-%d does not span line %d",
            boundaries.method_start, boundaries.method_end, target_index + 1,
        )
    return None


def _slice(lines: list[str], start_index: int, end_index: int) -> CodeContext:
    return CodeContext(
        code="\n".join(lines[start_index:end_index + 1]),
        start_line=start_index + 1,
        end_line=end_index + 1,
    )


def get_code_context(file_text: str, target_line: int) -> CodeContext:
    """Return the untouched source of the method containing ``target_line``.

    Falls back to a ``FALLBACK_RADIUS`` window when no enclosing method is
    found.

    Raises:
        ValueError: If ``target_line`` is outside the file.
    """
    lines = split_lines(file_text)
    if target_line < 1:
        raise ValueError(f"Target line must be at least 1, got {target_line}")
    if target_line > len(lines):
        raise ValueError(
            f"Target line {target_line} exceeds file length {len(lines)}"
        )

    target_index = target_line - 1
    boundaries = find_method_boundaries(lines, target_index)

    if boundaries is None:
        start, end = fallback_window(lines, target_index)
        logger.debug(
            "No enclosing method for line %d, using lines %d-%d",
            target_line, start + 1, end + 1,
        )
        return _slice(lines, start, end)

    return _slice(lines, boundaries.method_start - 1, boundaries.method_end - 1)


def fetch_code_context(
    client,
    repo: str | int,
    file_path: str,
    target_line: int,
    branch: str = "main",
) -> CodeContext:
    """Fetch a file through a crawler client and resolve the context of a line.

    A file that cannot be fetched gives a placeholder context pointing at the
    target line instead of an error.
    """
    file_text = client.get_file_content(repo, file_path, branch)
    if file_text is None:
        return CodeContext(
            code=f"[could not fetch {file_path}@{branch}]",
            start_line=target_line,
            end_line=target_line,
        )
    return get_code_context(file_text, target_line)
