"""
Unbalanced binary search tree.

Insert and delete descend recursively and hand the (possibly replaced) subtree
root back to the caller, which reassigns it into its child slot. Nothing is
rebalanced, so sorted input builds a linked-list shaped tree and the recursive
operations raise RecursionError once it is deeper than the interpreter limit.
Traversals walk with an explicit stack and are not affected by that limit.
"""

from typing import TypeVar, Generic, List, Optional

T = TypeVar('T')

PRE_ORDER = "pre"
IN_ORDER = "in"
POST_ORDER = "post"


class BinarySearchTree(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

    def __init__(self) -> None:
        self._root: Optional[BinarySearchTree.Node] = None

    def insert(self, value: T) -> None:
        """Add value; a value comparing equal to an existing one is ignored."""
        self._root = self._insert(self._root, value)

    def search(self, value: T) -> bool:
        return self._search(self._root, value)

    def delete(self, value: T) -> None:
        """Remove value if present. Missing values leave the tree unchanged."""
        self._root = self._delete(self._root, value)

    def pre_order(self) -> List[T]:
        return self._walk(PRE_ORDER)

    def in_order(self) -> List[T]:
        return self._walk(IN_ORDER)

    def post_order(self) -> List[T]:
        return self._walk(POST_ORDER)

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._min_value(self._root)

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def size(self) -> int:
        return len(self._walk(PRE_ORDER))

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Nodes on the longest root-to-leaf path; 0 for an empty tree."""
        if self._root is None:
            return 0
        best = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def clear(self) -> None:
        self._root = None

    def copy(self) -> 'BinarySearchTree[T]':
        # Re-inserting in pre-order rebuilds the same shape.
        clone: BinarySearchTree[T] = BinarySearchTree()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def _insert(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            return BinarySearchTree.Node(value)
        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        return node

    def _search(self, node: Optional[Node], value: T) -> bool:
        if node is None:
            return False
        if value < node.value:
            return self._search(node.left, value)
        if value > node.value:
            return self._search(node.right, value)
        return True

    def _delete(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            return None

        if value < node.value:
            node.left = self._delete(node.left, value)
        elif value > node.value:
            node.right = self._delete(node.right, value)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            # Two children: take over the in-order successor's value, then
            # remove the successor, which has no left child.
            node.value = self._min_value(node.right)
            node.right = self._delete(node.right, node.value)
        return node

    def _min_value(self, node: Node) -> T:
        while node.left is not None:
            node = node.left
        return node.value

    def _walk(self, order: str) -> List[T]:
        # Each stack entry carries a flag saying whether the node is due to be
        # emitted or still has to be expanded into its children.
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[tuple] = [(self._root, False)]
        while stack:
            node, emit = stack.pop()
            if emit:
                result.append(node.value)
                continue
            # Pushed in reverse of the visiting order.
            if order == POST_ORDER:
                stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if order == IN_ORDER:
                stack.append((node, True))
            if node.left is not None:
                stack.append((node.left, False))
            if order == PRE_ORDER:
                stack.append((node, True))
        return result

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: T) -> bool:
        return self.search(value)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self.size()})"
