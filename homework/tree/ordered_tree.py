"""Unbalanced binary search tree with parent back-links."""
from enum import Enum
from typing import Any, Generic, Iterator, Optional, Protocol, TypeVar

from homework.utils.logger import get_logger

logger = get_logger(__name__)


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=SupportsLessThan)


class RemovalCase(str, Enum):
    """Structural transform applied when a node leaves the tree."""
    LEAF = "leaf"
    SINGLE_CHILD = "single_child"
    TWO_CHILDREN = "two_children"


class TreeNode(Generic[T]):
    """A tree node owning its children, with a back-link to its parent."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: T):
        self.value = value
        self.parent: Optional["TreeNode[T]"] = None
        self.left: Optional["TreeNode[T]"] = None
        self.right: Optional["TreeNode[T]"] = None

    def attach_left(self, child: Optional["TreeNode[T]"]) -> None:
        self.left = child
        if child is not None:
            child.parent = self

    def attach_right(self, child: Optional["TreeNode[T]"]) -> None:
        self.right = child
        if child is not None:
            child.parent = self

    def replace_child(
        self,
        old_child: "TreeNode[T]",
        new_child: Optional["TreeNode[T]"],
    ) -> None:
        """Swap old_child for new_child in whichever slot holds it."""
        if self.left is old_child:
            self.attach_left(new_child)
        elif self.right is old_child:
            self.attach_right(new_child)
        else:
            return
        old_child.parent = None

    @property
    def removal_case(self) -> RemovalCase:
        if self.left is None and self.right is None:
            return RemovalCase.LEAF
        if self.left is not None and self.right is not None:
            return RemovalCase.TWO_CHILDREN
        return RemovalCase.SINGLE_CHILD

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"


class OrderedTree(Generic[T]):
    """Binary search tree storing distinct values.

    Values only need to support ``<``. Two values are treated as equal when
    neither is less than the other, so inserting an equal value is a no-op.
    No rebalancing is done: inserting sorted input degrades to a list.
    """

    def __init__(self):
        self._root: Optional[TreeNode[T]] = None
        self._size = 0

    def size(self) -> int:
        """Number of stored values."""
        return self._size

    def empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    @property
    def root(self) -> Optional[TreeNode[T]]:
        return self._root

    def insert(self, value: T) -> bool:
        """Insert a value unless an equal one is already stored.

        Args:
            value: Value to insert.

        Returns:
            True if the tree grew, False for a duplicate.
        """
        if self._root is None:
            self._root = TreeNode(value)
            self._size += 1
            return True

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.attach_left(TreeNode(value))
                    break
                node = node.left
            elif node.value < value:
                if node.right is None:
                    node.attach_right(TreeNode(value))
                    break
                node = node.right
            else:
                return False

        self._size += 1
        return True

    def contains(self, value: T) -> bool:
        return self._find(value) is not None

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def erase(self, value: T) -> bool:
        """Remove the node holding value, if any.

        Args:
            value: Value to remove.

        Returns:
            True if a node was removed, False if the value was absent.
        """
        node = self._find(value)
        if node is None:
            return False

        self._extract(node)
        node.left = node.right = node.parent = None
        self._size -= 1
        return True

    def minimum(self) -> T:
        """Smallest stored value.

        Raises:
            ValueError: If the tree is empty.
        """
        if self._root is None:
            raise ValueError("minimum() of an empty tree")
        return self._leftmost(self._root).value

    def clear(self) -> None:
        """Release every node, children before their parent."""
        released = 0
        stack: list[tuple[TreeNode[T], bool]] = []
        if self._root is not None:
            stack.append((self._root, False))

        while stack:
            node, children_done = stack.pop()
            if children_done:
                node.left = node.right = node.parent = None
                released += 1
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

        self._root = None
        self._size = 0
        logger.debug(f"Released {released} tree nodes")

    def __iter__(self) -> Iterator[T]:
        """Yield values in ascending order."""
        stack: list[TreeNode[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def check_invariants(self) -> bool:
        """Verify ordering, parent links and the element count."""
        if self._root is not None and self._root.parent is not None:
            return False

        count = 0
        previous: Optional[T] = None
        stack: list[TreeNode[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                for child in (node.left, node.right):
                    if child is not None and child.parent is not node:
                        logger.debug(f"Broken parent link below {node!r}")
                        return False
                stack.append(node)
                node = node.left
            node = stack.pop()
            if count and not previous < node.value:
                logger.debug(f"Out of order value at {node!r}")
                return False
            previous = node.value
            count += 1
            node = node.right

        return count == self._size

    def __repr__(self) -> str:
        return f"OrderedTree(size={self._size})"

    def _find(self, value: T) -> Optional[TreeNode[T]]:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return node
        return None

    @staticmethod
    def _leftmost(node: TreeNode[T]) -> TreeNode[T]:
        while node.left is not None:
            node = node.left
        return node

    def _extract(self, node: TreeNode[T]) -> None:
        """Unlink node from the tree, keeping the rest consistent."""
        case = node.removal_case
        if case is RemovalCase.LEAF:
            self._relink(node, None)
        elif case is RemovalCase.SINGLE_CHILD:
            child = node.left if node.left is not None else node.right
            self._relink(node, child)
        else:
            successor = self._leftmost(node.right)
            # The successor has no left child, so this is a leaf or single-child extraction.
            self._extract(successor)
            self._relink(node, successor)
            successor.attach_left(node.left)
            successor.attach_right(node.right)

    def _relink(
        self,
        node: TreeNode[T],
        replacement: Optional[TreeNode[T]],
    ) -> None:
        """Put replacement where node hangs, as root when node has no parent."""
        parent = node.parent
        if parent is not None:
            parent.replace_child(node, replacement)
        else:
            self._root = replacement
            if replacement is not None:
                replacement.parent = None
