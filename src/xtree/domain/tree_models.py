from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node type produced by the tree builder and the
highlight segment used by the renderer to describe matched spans.
"""

from dataclasses import dataclass
from typing import Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryNode:
    """
    Represents a directory retained in the pruned tree.

    Attributes:
        name: Base name of the directory. The root node stores the literal
              input path string instead.
        children: Retained subdirectories, in traversal order.
    """
    name: str
    children: Tuple["DirectoryNode", ...] = ()


@dataclass(frozen=True)
class HighlightSegment:
    """A slice of a displayed name and whether it is the matched span."""
    text: str
    highlighted: bool = False
