from __future__ import annotations

"""
Filtered Directory Tree Builder.

Walks the filesystem depth-first up to a bounded depth and keeps only the
branches that lead to a directory whose name contains the search term.
Inclusion is decided bottom-up from subtree scores, so the pruned tree is
fully materialized before anything is rendered.
"""

import logging
from typing import List, Optional, Tuple

from xtree.domain.tree_models import DirectoryNode
from xtree.infra.fs import describe_path, list_subdirectories

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_filtered_tree(
        root_path: str,
        term_lower: str,
        max_depth: int,
        sort_entries: bool = True,
) -> Optional[DirectoryNode]:
    """
    Build the pruned directory tree for a search term.

    The root itself is never tested against the term. An unreadable or
    missing root yields the same result as a tree without matches.

    Args:
        root_path: Starting directory, kept verbatim as the root node name.
        term_lower: Lowercased search term.
        max_depth: Maximum recursion depth (0 scans nothing).
        sort_entries: Sort siblings by name instead of enumeration order.

    Returns:
        Optional[DirectoryNode]: The pruned tree, or None if nothing matches.
    """
    logger.debug(
        f"Scanning '{describe_path(root_path)}' for '{term_lower}' (max depth {max_depth})"
    )

    children, score = scan_directory(root_path, 0, max_depth, term_lower, sort_entries)
    if score == 0:
        logger.debug("Scan finished without matches.")
        return None

    logger.debug(f"Scan finished with {score} matching directories.")
    return DirectoryNode(name=root_path, children=tuple(children))


def scan_directory(
        path: str,
        current_depth: int,
        max_depth: int,
        term_lower: str,
        sort_entries: bool = True,
) -> Tuple[List[DirectoryNode], int]:
    """
    Recursively scan a directory and return its retained children and score.

    A subdirectory is retained when its own name matches or any of its
    descendants does. Its score (1 for an own match plus the score of its
    subtree) counts towards the total even when it is dropped.

    Args:
        path: Directory to scan.
        current_depth: Depth of 'path' relative to the root (root is 0).
        max_depth: Depth at which recursion stops.
        term_lower: Lowercased search term.
        sort_entries: Sort siblings by name instead of enumeration order.

    Returns:
        Tuple[List[DirectoryNode], int]: Retained children and total score.
    """
    if current_depth >= max_depth:
        return [], 0

    children: List[DirectoryNode] = []
    total_score = 0

    for name, full_path in list_subdirectories(path, sort_entries=sort_entries):
        sub_children, child_score = scan_directory(
            full_path, current_depth + 1, max_depth, term_lower, sort_entries
        )
        name_matches = term_lower in name.lower()
        own_score = 1 if name_matches else 0

        if name_matches or child_score > 0:
            children.append(DirectoryNode(name=name, children=tuple(sub_children)))

        total_score += own_score + child_score

    return children, total_score
