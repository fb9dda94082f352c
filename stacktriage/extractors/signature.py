"""Locate Java method signatures with line-level heuristics.

There is no parser here. The locator walks upward from a target line and
tests each line against two patterns: a declaration that starts with a
modifier, and a package-private declaration that starts with a return type.
The second form is ambiguous with plain statements, so it lives behind
``is_package_declaration`` where it can be tuned on its own.
"""

import re

from .scrubber import TextBlockState, scrub_line

# Lines scanned past a signature start while looking for ``{`` or ``;``
SIGNATURE_LOOKAHEAD = 30

ANNOTATION_PATTERN = re.compile(r'^\s*@[\w.]+(\([^)]*\))?\s*$')

MODIFIER_PATTERN = re.compile(
    r'^\s*(?:@[\w.]+(?:\([^)]*\))?\s*)*'
    r'(?:public|private|protected|static|final|synchronized|native|abstract|default|strictfp)\b'
    r'(?!\s*(?::|->))'
)

LEADING_ANNOTATIONS_PATTERN = re.compile(r'^\s*(?:@[\w.]+(?:\([^)]*\))?\s*)*')

# Method name directly before the parameter list; ``synchronized (lock)`` has none
TRAILING_NAME_PATTERN = re.compile(r'\w\s*$')

# Return type must be a primitive, a capitalised reference type, or come after
# a generic parameter list, e.g. ``void check()``, ``String getName()``,
# ``<T> List<T> getList()``. A bare ``doSomething(...)`` call never matches.
PACKAGE_METHOD_PATTERN = re.compile(
    r'^\s*(?!return\b|throw\b|new\b|case\b|else\b|if\b|while\b|for\b|switch\b)'
    r'(?:<[^>]+>\s*)?'
    r'(?:(?:void|boolean|byte|char|short|int|long|float|double)(?:\[\])*|[A-Z]\w*[\w<>\[\].,\s]*)'
    r'\s+\w+\s*\('
)

CONTROL_KEYWORD_PATTERN = re.compile(
    r'^(?:if|while|for|switch|return|throw|else|case)\b'
)

TYPE_DECLARATION_PATTERN = re.compile(r'\b(?:class|interface|enum|record)\s+\w+')


def is_annotation_line(line: str) -> bool:
    """True for a line holding a single annotation and nothing else."""
    return bool(ANNOTATION_PATTERN.match(line))


def has_modifier(line: str) -> bool:
    """Modifier-led method declaration, optionally after inline annotations.

    Neither an assignment nor a type declaration may come before the
    parameter list, so fields and ``public class Foo {`` headers are not taken
    for methods. When the parameter list is on a later line, the line must
    still be open: no ``;`` and no ``{``.
    """
    match = MODIFIER_PATTERN.match(line)
    if not match:
        return False
    rest = line[match.end():]
    paren = rest.find("(")
    head = rest if paren == -1 else rest[:paren]
    if "=" in head or TYPE_DECLARATION_PATTERN.search(head):
        return False
    if paren == -1:
        return ";" not in rest and "{" not in rest
    return bool(TRAILING_NAME_PATTERN.search(head))


def is_package_declaration(line: str) -> bool:
    """Modifier-less declaration such as ``void check() {``.

    Rejects control statements, assignments, and anything with a ``.`` before
    the parameter list, which marks a call or chained invocation.
    """
    if not PACKAGE_METHOD_PATTERN.match(line):
        return False
    paren = line.find("(")
    if paren == -1 or "." in line[:paren] or "=" in line:
        return False
    return not CONTROL_KEYWORD_PATTERN.match(line.strip())


def is_signature_line(line: str) -> bool:
    return has_modifier(line) or is_package_declaration(line)


def looks_like_declaration(text: str) -> bool:
    """True if ``;``-terminated text reads as a bodyless method declaration."""
    text = LEADING_ANNOTATIONS_PATTERN.sub("", text, count=1)
    paren = text.find("(")
    if paren == -1 or text.find(")", paren) == -1:
        return False
    return "." not in text[:paren] and "=" not in text


def _opens_block_comment_above(line: str) -> bool:
    """A ``*/`` with no ``/*`` before it means the comment began on an earlier line."""
    return "*/" in scrub_line(line, TextBlockState())


def iter_signature_candidates(lines: list[str], target_index: int):
    """Yield indexes of possible signature starts, walking up from ``target_index``."""
    index = target_index
    while index >= 0:
        line = lines[index]
        stripped = line.strip()

        if not stripped or stripped.startswith("//"):
            index -= 1
            continue

        if _opens_block_comment_above(line):
            while index >= 0 and "/*" not in lines[index]:
                index -= 1
            index -= 1
            continue

        if stripped.startswith("*"):
            index -= 1
            continue

        if is_signature_line(line) and not _continues_parameter_list(lines, index):
            yield index
        index -= 1


def _continues_parameter_list(lines: list[str], index: int) -> bool:
    """True if the code line above ends in ``,`` or ``(``, e.g. ``final String b,``."""
    for above in range(index - 1, -1, -1):
        stripped = lines[above].strip()
        if not stripped or stripped.startswith("//"):
            continue
        code = scrub_line(lines[above], TextBlockState()).rstrip()
        return code.endswith((",", "("))
    return False


def locate_signature_start(lines: list[str], target_index: int) -> int | None:
    """Index of the nearest signature candidate at or above ``target_index``."""
    return next(iter_signature_candidates(lines, target_index), None)


def resolve_signature_end(lines: list[str], start_index: int) -> int | None:
    """Find the line that finishes the signature starting at ``start_index``.

    That is the first line opening the body, or the ``;`` closing a bodyless
    declaration. A ``;`` that ends an ordinary statement means the candidate
    was not a signature. Gives up after ``SIGNATURE_LOOKAHEAD`` lines.
    """
    state = TextBlockState()
    seen: list[str] = []
    last = min(len(lines) - 1, start_index + SIGNATURE_LOOKAHEAD)

    for index in range(start_index, last + 1):
        scrubbed = scrub_line(lines[index], state)
        seen.append(scrubbed)
        if "{" in scrubbed:
            return index
        if scrubbed.rstrip().endswith(";"):
            if looks_like_declaration(" ".join(seen)):
                return index
            return None

    return None


def iter_signatures(lines: list[str], target_index: int):
    """Yield ``(start, end)`` indexes of complete signatures, nearest first.

    Candidates whose span cannot be resolved are passed over and the walk
    continues further up the file.
    """
    for start in iter_signature_candidates(lines, target_index):
        end = resolve_signature_end(lines, start)
        if end is not None:
            yield start, end


def find_signature(lines: list[str], target_index: int) -> tuple[int, int] | None:
    """Return ``(start, end)`` indexes of the closest complete signature."""
    return next(iter_signatures(lines, target_index), None)


def merge_annotations(lines: list[str], signature_start: int) -> int:
    """Extend a signature start upward over directly preceding annotation lines."""
    start = signature_start
    for index in range(signature_start - 1, -1, -1):
        line = lines[index]
        stripped = line.strip()
        if not stripped or stripped.startswith("//"):
            break
        if not is_annotation_line(line):
            break
        start = index
    return start
