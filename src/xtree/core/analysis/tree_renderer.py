from __future__ import annotations

"""
Tree Renderer.

Converts a pruned DirectoryNode tree into box-drawing text lines. Matched
name spans are computed as plain segments first and only then wrapped in
ANSI color codes, so highlighting can be tested without a terminal.
"""

from typing import List, Optional, Tuple

from xtree.domain.constants import (
    BRANCH_CORNER,
    BRANCH_TEE,
    HIGHLIGHT_RESET,
    HIGHLIGHT_START,
    PREFIX_BLANK,
    PREFIX_PIPE,
)
from xtree.domain.tree_models import DirectoryNode, HighlightSegment

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        node: DirectoryNode,
        term_lower: str,
        lines: List[str],
        prefix: str = "",
        suppress_current_level: bool = False,
        suppress_footer: bool = False,
        color: bool = True,
) -> int:
    """
    Recursively render the children of a node into a list of strings.

    Uses standard connectors (├──, └──) and extends the indentation prefix so
    each level shows which ancestors still have siblings below them. Only
    children whose own name matches are highlighted and counted.

    Args:
        node: Current node whose children are rendered.
        term_lower: Lowercased search term.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        suppress_current_level: Skip emitting this level's lines and keep
                                the prefix unchanged for the next one.
        suppress_footer: Skip the trailing count summary.
        color: Wrap matched spans in ANSI color codes.

    Returns:
        int: Number of rendered directories whose own name matches.
    """
    match_count = 0
    total = len(node.children)

    for i, child in enumerate(node.children):
        is_last = (i == total - 1)
        connector = BRANCH_CORNER if is_last else BRANCH_TEE

        if suppress_current_level:
            child_prefix = prefix
        else:
            child_prefix = prefix + (PREFIX_BLANK if is_last else PREFIX_PIPE)

            display_name = child.name
            if term_lower in child.name.lower():
                match_count += 1
                display_name = highlight_substring(child.name, term_lower, color=color)
            lines.append(f"{prefix}{connector}{display_name}")

        match_count += render_tree(
            child,
            term_lower,
            lines,
            prefix=child_prefix,
            suppress_current_level=False,
            suppress_footer=True,
            color=color,
        )

    if not suppress_footer:
        lines.append("")
        lines.append(format_count(match_count))

    return match_count


def format_count(count: int) -> str:
    """Format the summary line ('1 directory', 'N directories')."""
    noun = "directory" if count == 1 else "directories"
    return f"{count} {noun}"


def highlight_segments(name: str, term_lower: str) -> List[HighlightSegment]:
    """
    Split a name around the first case-insensitive occurrence of the term.

    The returned segments always concatenate back to the original name.

    Args:
        name: Original-case directory name.
        term_lower: Lowercased search term.

    Returns:
        List[HighlightSegment]: Before / match / after segments, or a single
                                plain segment when the term is not found.
    """
    span = _locate_match(name, term_lower)
    if span is None:
        return [HighlightSegment(name)]

    start, end = span
    segments = [
        HighlightSegment(name[:start]),
        HighlightSegment(name[start:end], highlighted=True),
        HighlightSegment(name[end:]),
    ]
    return [s for s in segments if s.text]


def highlight_substring(name: str, term_lower: str, color: bool = True) -> str:
    """
    Wrap the first matched span of a name in terminal color codes.

    Args:
        name: Original-case directory name.
        term_lower: Lowercased search term.
        color: When False the name is returned unchanged.

    Returns:
        str: Display string for the terminal.
    """
    if not color:
        return name

    parts: List[str] = []
    for segment in highlight_segments(name, term_lower):
        if segment.highlighted:
            parts.append(f"{HIGHLIGHT_START}{segment.text}{HIGHLIGHT_RESET}")
        else:
            parts.append(segment.text)
    return "".join(parts)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _locate_match(name: str, term_lower: str) -> Optional[Tuple[int, int]]:
    """
    Find the [start, end) span of the term inside the original-case name.

    When lowercasing changes the length of the name (e.g. 'İ'), indices of the
    lowered string no longer line up, so windows of the original are compared.
    """
    if not term_lower:
        return None

    lowered = name.lower()
    if len(lowered) == len(name):
        pos = lowered.find(term_lower)
        if pos < 0:
            return None
        return pos, pos + len(term_lower)

    for start in range(len(name)):
        for end in range(start + 1, len(name) + 1):
            window = name[start:end].lower()
            if window == term_lower:
                return start, end
            if len(window) >= len(term_lower):
                break
    return None
