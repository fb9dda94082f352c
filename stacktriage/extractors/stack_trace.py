"""Parse JVM stack traces into frames that point at source files."""

import re

from .models import StackFrame

DEFAULT_SOURCE_ROOT = "src/main/java"

# at [module/]com.example.Foo$Bar.method(Foo.java:42)
FRAME_PATTERN = re.compile(
    r'^\s*at\s+'
    r'(?:[^\s/(]*/)*'
    r'(?P<class_name>[\w$.]+)\.(?P<method_name>[\w$<>]+)'
    r'\((?P<file_name>[^:()]+):(?P<line_number>\d+)\)'
)


def source_path_for(class_name: str, file_name: str, source_root: str = DEFAULT_SOURCE_ROOT) -> str:
    """Repository path of the file declaring ``class_name``.

    Nested classes (``Outer$Inner``) live in the outer class's file, which is
    the file name the frame reports.
    """
    package = class_name.rpartition(".")[0]
    parts = [p for p in source_root.strip("/").split("/") if p]
    if package:
        parts.extend(package.split("."))
    parts.append(file_name)
    return "/".join(parts)


def parse_frame(line: str, source_root: str = DEFAULT_SOURCE_ROOT) -> StackFrame | None:
    """Parse a single ``at ...`` line; None for anything without a line number."""
    match = FRAME_PATTERN.match(line)
    if not match:
        return None
    return StackFrame(
        class_name=match.group("class_name"),
        method_name=match.group("method_name"),
        file_path=source_path_for(
            match.group("class_name"), match.group("file_name"), source_root
        ),
        line_number=int(match.group("line_number")),
        raw_line=line.strip(),
    )


def parse_stack_trace(text: str, source_root: str = DEFAULT_SOURCE_ROOT) -> list[StackFrame]:
    """All frames of a stack trace with a file and line, ``Caused by`` sections included."""
    frames = []
    for line in text.splitlines():
        frame = parse_frame(line, source_root)
        if frame is not None:
            frames.append(frame)
    return frames


def _in_packages(class_name: str, package_prefixes: list[str]) -> bool:
    return any(
        class_name == prefix or class_name.startswith(prefix + ".")
        for prefix in package_prefixes
    )


def select_frame(
    frames: list[StackFrame],
    package_prefixes: list[str] | None = None,
) -> StackFrame | None:
    """Top-most frame in application code.

    With no prefixes configured the top frame of the trace is used.
    """
    if not frames:
        return None
    if not package_prefixes:
        return frames[0]
    for frame in frames:
        if _in_packages(frame.class_name, package_prefixes):
            return frame
    return None
