"""
Iterator pattern: traversing a file-picker folder tree.

Traversal orders:
    preorder - depth-first, parent before children, children left to right
    breadth  - level by level, left to right

Every make_iterator() call returns a new iterator with its own cursor, so
an exhausted iterator never affects the next traversal.
"""

from collections import deque
from typing import Any, Deque, Iterable, Iterator, List

from catalog.effects import EffectLog
from catalog.errors import InvalidInput
from catalog.patterns.base import PatternDemo


class TreeNode:
    def __init__(self, name: str, children: Iterable["TreeNode"] = ()) -> None:
        self.name = name
        self.children: List["TreeNode"] = list(children)

    def add(self, child: "TreeNode") -> "TreeNode":
        self.children.append(child)
        return self

    def make_iterator(self, order: str = "preorder") -> Iterator["TreeNode"]:
        """Create a fresh iterator over this subtree.

        Args:
            order: "preorder" or "breadth"

        Raises:
            InvalidInput: For an unknown order
        """
        if order == "preorder":
            return PreOrderIterator(self)
        if order == "breadth":
            return BreadthFirstIterator(self)
        raise InvalidInput(f"unknown traversal order {order!r}")

    def __iter__(self) -> Iterator["TreeNode"]:
        return self.make_iterator()

    def __repr__(self) -> str:
        return f"TreeNode({self.name!r})"


class PreOrderIterator:
    """Depth-first pre-order using an explicit stack."""

    def __init__(self, root: TreeNode) -> None:
        self._stack: List[TreeNode] = [root]

    def __iter__(self) -> "PreOrderIterator":
        return self

    def __next__(self) -> TreeNode:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        # Reversed so the leftmost child is popped first
        self._stack.extend(reversed(node.children))
        return node


class BreadthFirstIterator:
    def __init__(self, root: TreeNode) -> None:
        self._queue: Deque[TreeNode] = deque([root])

    def __iter__(self) -> "BreadthFirstIterator":
        return self

    def __next__(self) -> TreeNode:
        if not self._queue:
            raise StopIteration
        node = self._queue.popleft()
        self._queue.extend(node.children)
        return node


def build_tree(shape: Any) -> TreeNode:
    """Build a tree from nested ``[name, [children...]]`` lists or a bare name."""
    if isinstance(shape, str):
        return TreeNode(shape)
    if isinstance(shape, (list, tuple)) and shape and isinstance(shape[0], str):
        children = shape[1] if len(shape) > 1 else []
        if not isinstance(children, (list, tuple)):
            raise InvalidInput(f"children of {shape[0]!r} must be a list, got {children!r}")
        return TreeNode(shape[0], [build_tree(child) for child in children])
    raise InvalidInput(f"cannot build a tree node from {shape!r}")


class IteratorDemo(PatternDemo):
    name = "iterator"
    summary = "Restartable pre-order and breadth-first iterators over a folder tree"
    default_inputs = {
        "tree": ["Photos", [["2023", ["beach.jpg", "hike.jpg"]], ["2024", ["city.jpg"]]]],
        "orders": ["preorder", "breadth"],
    }

    def demonstrate(self, effects: EffectLog, **inputs: Any) -> None:
        root = build_tree(inputs["tree"])
        for order in inputs["orders"]:
            names = [node.name for node in root.make_iterator(str(order))]
            effects.emit(f"{order}: {', '.join(names)}")
