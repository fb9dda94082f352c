"""Method boundary extraction for Java sources."""

from .models import CodeContext, FrameContext, MethodBoundaries, StackFrame
from .scrubber import TextBlockState, scrub_line
from .signature import (
    SIGNATURE_LOOKAHEAD,
    is_package_declaration,
    locate_signature_start,
    merge_annotations,
    resolve_signature_end,
)
from .body import resolve_body_end
from .context import (
    FALLBACK_RADIUS,
    fallback_window,
    fetch_code_context,
    find_method_boundaries,
    get_code_context,
)
from .stack_trace import parse_stack_trace, select_frame

__all__ = [
    "CodeContext",
    "FrameContext",
    "MethodBoundaries",
    "StackFrame",
    "TextBlockState",
    "scrub_line",
    "SIGNATURE_LOOKAHEAD",
    "is_package_declaration",
    "locate_signature_start",
    "merge_annotations",
    "resolve_signature_end",
    "resolve_body_end",
    "FALLBACK_RADIUS",
    "fallback_window",
    "fetch_code_context",
    "find_method_boundaries",
    "get_code_context",
    "parse_stack_trace",
    "select_frame",
]
