"""Main entry point for stacktriage."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .config import default_branch, get_platform, load_config, stack_trace_settings
from .crawler.github_client import GitHubClient
from .crawler.gitlab_client import GitLabClient
from .crawler.local_client import LocalClient
from .extractors.context import fetch_code_context
from .extractors.models import FrameContext, StackFrame
from .extractors.stack_trace import parse_stack_trace, select_frame
from .output import format_context, render_context, to_json

console = Console()


def build_client(config: dict, platform: str):
    """Create the file client for the configured platform."""
    if platform == "github":
        gh_config = config.get("github", {})
        if not gh_config.get("repo"):
            console.print("[red]Error:[/red] github.repo is not configured")
            raise SystemExit(1)
        return GitHubClient(
            token=gh_config.get("token", ""),
            repo=gh_config.get("repo"),
        )
    if platform == "gitlab":
        gl_config = config.get("gitlab", {})
        if not gl_config.get("project"):
            console.print("[red]Error:[/red] gitlab.project is not configured")
            raise SystemExit(1)
        return GitLabClient(
            url=gl_config.get("url", ""),
            token=gl_config.get("token", ""),
            project=gl_config.get("project"),
        )
    return LocalClient(root=config.get("local", {}).get("root", "."))


def read_trace(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def frame_from_trace(config: dict, trace_text: str) -> StackFrame:
    """Pick the application frame of a stack trace or exit."""
    source_root, package_prefixes = stack_trace_settings(config)
    frames = parse_stack_trace(trace_text, source_root=source_root)
    frame = select_frame(frames, package_prefixes)
    if frame is None:
        console.print("[red]Error:[/red] No usable frame found in stack trace")
        raise SystemExit(1)
    console.print(f"[blue]Frame:[/blue] {frame.raw_line}")
    return frame


def resolve_frame(client, frame: StackFrame, branch: str) -> FrameContext:
    context = fetch_code_context(client, None, frame.file_path, frame.line_number, branch)
    return FrameContext(frame=frame, context=context)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="stacktriage - Show the method behind a stack trace line"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to configuration file (default: config/config.yaml if present)",
    )
    parser.add_argument(
        "--platform",
        choices=["local", "github", "gitlab"],
        help="Where to read source files from (default: detected from config)",
    )
    parser.add_argument(
        "--file", "-f",
        help="Repository path of the source file",
    )
    parser.add_argument(
        "--line", "-l",
        type=int,
        help="1-based line number inside --file",
    )
    parser.add_argument(
        "--trace", "-t",
        help="Stack trace file to take the frame from ('-' for stdin)",
    )
    parser.add_argument(
        "--branch", "-b",
        help="Branch or revision to read (default: from config, else main)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the context as JSON",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print a plain-text report with line number annotations",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    config = load_config(Path(args.config) if args.config else None)
    platform = args.platform or get_platform(config)
    branch = args.branch or default_branch(config)

    if args.trace:
        frame = frame_from_trace(config, read_trace(args.trace))
    elif args.file and args.line is not None:
        frame = StackFrame(
            class_name="",
            method_name="",
            file_path=args.file,
            line_number=args.line,
            raw_line="",
        )
    else:
        parser.print_help()
        return

    client = build_client(config, platform)
    if platform != "local" and not client.authenticate():
        raise SystemExit(1)

    try:
        result = resolve_frame(client, frame, branch)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if args.json:
        print(to_json(result.context, frame.file_path, branch, frame.line_number))
    elif args.plain:
        print(format_context(result.context, frame.file_path, branch, frame.line_number))
    else:
        render_context(result.context, frame.file_path, branch, frame.line_number)


if __name__ == "__main__":
    main()
