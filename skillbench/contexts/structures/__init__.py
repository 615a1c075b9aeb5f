"""
Structures Context

Responsibilities:
- Maintains n-ary trees with consistent parent/child links
- Stores case-insensitive string sets and filters them

Owns: In-memory collection types
Never: Parses or renders text formats
"""

from skillbench.contexts.structures.string_filter import StringFilter
from skillbench.contexts.structures.tree_node import TreeNode

__all__ = ["StringFilter", "TreeNode"]
