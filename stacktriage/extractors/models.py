"""Data models shared by the extractors."""

from dataclasses import dataclass


@dataclass
class StackFrame:
    """One ``at ...`` frame from a JVM stack trace."""
    class_name: str
    method_name: str
    file_path: str
    line_number: int
    raw_line: str


@dataclass(frozen=True)
class MethodBoundaries:
    """1-based, inclusive line range of the method enclosing a target line."""
    method_start: int
    method_end: int

    def contains(self, line_number: int) -> bool:
        return self.method_start <= line_number <= self.method_end


@dataclass
class CodeContext:
    """Original source text of a resolved line range."""
    code: str
    start_line: int
    end_line: int

    @property
    def total_lines(self) -> int:
        return self.end_line - self.start_line + 1

    def line_at(self, line_number: int) -> str | None:
        """Return the source of an absolute line number inside this context."""
        offset = line_number - self.start_line
        lines = self.code.split("\n")
        if 0 <= offset < len(lines):
            return lines[offset]
        return None


@dataclass
class FrameContext:
    """A stack frame paired with the code of its enclosing method."""
    frame: StackFrame
    context: CodeContext
