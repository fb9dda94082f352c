"""Strip strings and comments from Java source lines before brace counting."""

from dataclasses import dataclass

TEXT_BLOCK = '"""'
LINE_COMMENT = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
QUOTES = "\"'"


@dataclass
class TextBlockState:
    """Literals and comments opened on an earlier line and not yet closed.

    ``active`` tracks a multi-line text block, ``in_comment`` a multi-line
    block comment.
    """
    active: bool = False
    in_comment: bool = False


def scrub_line(line: str, state: TextBlockState) -> str:
    """Remove literal and comment content from one line.

    ``state`` is carried between consecutive lines of one pass and is updated
    in place when a text block or block comment opens or closes. Quoted
    literals collapse to an empty literal of the same kind (``""`` or ``''``),
    comments and text block bodies disappear. The result only keeps what
    matters for counting braces and is never shown to users.
    """
    pos = 0
    length = len(line)

    if state.active:
        end = line.find(TEXT_BLOCK)
        if end == -1:
            return ""
        pos = end + len(TEXT_BLOCK)
        state.active = False

    if state.in_comment:
        end = line.find(BLOCK_COMMENT_CLOSE, pos)
        if end == -1:
            return ""
        pos = end + len(BLOCK_COMMENT_CLOSE)
        state.in_comment = False

    kept: list[str] = []
    while pos < length:
        if line.startswith(TEXT_BLOCK, pos):
            end = line.find(TEXT_BLOCK, pos + len(TEXT_BLOCK))
            if end == -1:
                state.active = True
                break
            pos = end + len(TEXT_BLOCK)
            continue

        if line.startswith(LINE_COMMENT, pos):
            break

        if line.startswith(BLOCK_COMMENT_OPEN, pos):
            end = line.find(BLOCK_COMMENT_CLOSE, pos + len(BLOCK_COMMENT_OPEN))
            if end == -1:
                state.in_comment = True
                break
            pos = end + len(BLOCK_COMMENT_CLOSE)
            continue

        char = line[pos]
        if char in QUOTES:
            pos = _skip_quoted(line, pos)
            kept.append(char * 2)
            continue

        kept.append(char)
        pos += 1

    return "".join(kept)


def _skip_quoted(line: str, start: int) -> int:
    """Return the index just past the literal opened at ``start``."""
    quote = line[start]
    pos = start + 1
    while pos < len(line):
        if line[pos] == "\\":
            pos += 2
            continue
        if line[pos] == quote:
            return pos + 1
        pos += 1
    return len(line)


def brace_delta(scrubbed: str) -> int:
    """Net nesting change contributed by an already scrubbed line."""
    return scrubbed.count("{") - scrubbed.count("}")
