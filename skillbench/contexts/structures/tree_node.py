"""
Generic n-ary tree node.

A node owns its children; the parent link is a back-reference kept
consistent by add_child(), remove_child() and the parent setter, so a node
always has at most one parent and appears in that parent's children.
"""

from typing import Any, Iterator, List, Optional

from skillbench.utils.settings import get_settings


class TreeNode:
    """
    Tree node holding an arbitrary data object.

    Nodes start collapsed, without data, parent or children.
    """

    def __init__(self, data: Any = None):
        self.data = data
        self._parent: Optional["TreeNode"] = None
        self._children: List["TreeNode"] = []
        self._expanded = False

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r})"

    # =========================================================================
    # PARENT / CHILD LINKS
    # =========================================================================

    @property
    def parent(self) -> Optional["TreeNode"]:
        return self._parent

    @parent.setter
    def parent(self, parent: Optional["TreeNode"]) -> None:
        """Move this node under parent (or detach it when parent is None)."""
        if parent is self._parent:
            return
        if parent is None:
            self._parent.remove_child(self)
        else:
            parent.add_child(self)

    @property
    def root(self) -> "TreeNode":
        """Topmost ancestor; a node without a parent is its own root."""
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    def is_leaf(self) -> bool:
        return not self._children

    @property
    def child_count(self) -> int:
        return len(self._children)

    def iter_children(self) -> Iterator["TreeNode"]:
        return iter(list(self._children))

    def _is_ancestor_or_self(self, node: "TreeNode") -> bool:
        current = self
        while current is not None:
            if current is node:
                return True
            current = current._parent
        return False

    def add_child(self, child: "TreeNode") -> None:
        """
        Append child and make this node its parent.

        A child already attached elsewhere is detached from its old parent first.

        Raises:
            ValueError: If child is this node or one of its ancestors
        """
        if self._is_ancestor_or_self(child):
            raise ValueError("Cannot attach a node under itself or its own descendant")
        if child._parent is not None:
            child._parent.remove_child(child)
        self._children.append(child)
        child._parent = self

    def remove_child(self, child: "TreeNode") -> bool:
        """
        Remove the first child equal to child and clear its parent.

        Returns:
            True if a child was removed, False if no such child exists
        """
        for index, candidate in enumerate(self._children):
            if candidate == child:
                del self._children[index]
                candidate._parent = None
                return True
        return False

    # =========================================================================
    # EXPANSION
    # =========================================================================

    @property
    def expanded(self) -> bool:
        return self._expanded

    @expanded.setter
    def expanded(self, expanded: bool) -> None:
        """Expand or collapse this node and its whole subtree."""
        self._expanded = expanded
        for child in self._children:
            child.expanded = expanded

    # =========================================================================
    # PATHS AND SEARCH
    # =========================================================================

    def get_tree_path(self, separator: Optional[str] = None, empty_token: Optional[str] = None) -> str:
        """
        Path from the root to this node, e.g. "root->empty->leaf".

        Each element is str(data), or the empty token for nodes without data.

        Args:
            separator: Element separator (tree.path_separator)
            empty_token: Placeholder for data-less nodes (tree.empty_token)
        """
        settings = get_settings().tree
        separator = separator if separator is not None else settings.path_separator
        empty_token = empty_token if empty_token is not None else settings.empty_token

        elements = []
        node = self
        while node is not None:
            elements.append(empty_token if node.data is None else str(node.data))
            node = node._parent
        return separator.join(reversed(elements))

    def find_parent(self, data: Any) -> Optional["TreeNode"]:
        """
        Nearest node holding data, walking up from (and including) this node.

        Returns:
            The matching node, or None
        """
        node = self
        while node is not None and node.data != data:
            node = node._parent
        return node

    def find_child(self, data: Any) -> Optional["TreeNode"]:
        """
        First descendant holding data, depth-first.

        Each child is checked, then that child's subtree, before the next child.

        Returns:
            The matching node, or None
        """
        for child in self._children:
            if child.data == data:
                return child
            found = child.find_child(data)
            if found is not None:
                return found
        return None
