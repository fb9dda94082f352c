"""Render resolved code contexts for people and for downstream tools."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from .extractors.models import CodeContext

console = Console()

RULE_WIDTH = 80


def describe_context(
    context: CodeContext,
    file_path: str,
    branch: str,
    error_line: int,
) -> dict:
    """Structured summary of a context, as handed to analysis consumers."""
    return {
        "file_path": file_path,
        "branch": branch,
        "method_range": {
            "start_line": context.start_line,
            "end_line": context.end_line,
            "total_lines": context.total_lines,
        },
        "error_location": {
            "line": error_line,
            "relative_position": error_line - context.start_line + 1,
        },
        "code": context.code,
    }


def annotate_lines(context: CodeContext) -> str:
    """Suffix every code line with its absolute line number."""
    return "\n".join(
        f"{line}  // line {context.start_line + offset}"
        for offset, line in enumerate(context.code.split("\n"))
    )


def format_context(
    context: CodeContext,
    file_path: str,
    branch: str,
    error_line: int,
) -> str:
    """Plain-text report of a context with the failing line called out."""
    error_code = context.line_at(error_line)
    rule = "=" * RULE_WIDTH
    return "\n".join([
        f"File: {file_path}",
        f"Branch: {branch}",
        f"Method range: lines {context.start_line}-{context.end_line} ({context.total_lines} lines)",
        f"Error location: line {error_line} (line {error_line - context.start_line + 1} of method)",
        f"Error code: {error_code.strip() if error_code is not None else '(line not available)'}",
        "",
        "Method code:",
        rule,
        annotate_lines(context),
        rule,
    ])


def to_json(
    context: CodeContext,
    file_path: str,
    branch: str,
    error_line: int,
) -> str:
    return json.dumps(describe_context(context, file_path, branch, error_line), indent=2)


def render_context(
    context: CodeContext,
    file_path: str,
    branch: str,
    error_line: int,
) -> None:
    """Print a context to the console with the error line highlighted."""
    console.print(f"[bold]{file_path}[/bold] @ {branch}")
    console.print(
        f"  Method range: lines {context.start_line}-{context.end_line} "
        f"({context.total_lines} lines)"
    )
    console.print(
        f"  Error location: line {error_line} "
        f"(line {error_line - context.start_line + 1} of method)"
    )
    syntax = Syntax(
        context.code,
        "java",
        line_numbers=True,
        start_line=context.start_line,
        highlight_lines={error_line},
    )
    console.print(Panel(syntax, expand=False))
