import logging
from typing import Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


class BinaryTree:
    """Unbalanced binary search tree of unique integer keys.

    Keys are kept in natural ordering. No rebalancing is done, so inserting
    keys in sorted order produces a tree shaped like a linked list. All walks
    are iterative, which keeps such degenerate trees clear of the recursion
    limit.
    """

    INDENT = "-~-"
    VALUE_WIDTH = 3
    EOL = "\n"

    class Node:
        def __init__(self, value: int) -> None:
            self.value: int = value
            self.left: Optional['BinaryTree.Node'] = None
            self.right: Optional['BinaryTree.Node'] = None

        def __repr__(self) -> str:
            return f"Node[{self.value}]"

    def __init__(self, keys: Optional[Iterable[int]] = None) -> None:
        self._root: Optional[BinaryTree.Node] = None
        self._size: int = 0
        if keys is not None:
            self.add_all(keys)

    def add(self, key: int) -> bool:
        """Insert ``key``; return False if it is already present."""
        _check_key(key)
        if self._root is None:
            self._root = BinaryTree.Node(key)
            self._size += 1
            logger.debug("added %d as root", key)
            return True

        node = self._root
        while True:
            if key < node.value:
                if node.left is None:
                    node.left = BinaryTree.Node(key)
                    break
                node = node.left
            elif key > node.value:
                if node.right is None:
                    node.right = BinaryTree.Node(key)
                    break
                node = node.right
            else:
                logger.debug("skipped duplicate key %d", key)
                return False

        self._size += 1
        logger.debug("added %d under %r", key, node)
        return True

    def add_all(self, keys: Iterable[int]) -> None:
        """Insert every key in order, skipping ones already present.

        The whole sequence is validated first, so a bad element leaves the
        tree untouched.
        """
        if keys is None:
            raise ValueError("keys must not be None")
        pending = list(keys)
        for key in pending:
            _check_key(key)
        for key in pending:
            self.add(key)

    def remove(self, key: int) -> Optional[int]:
        """Remove ``key`` and return it, or return None if it is absent.

        A node with two children takes the value of its in-order successor
        (the smallest key of its right subtree), and the successor node is
        unlinked instead.
        """
        _check_key(key)
        parent: Optional[BinaryTree.Node] = None
        node = self._root
        is_left_child = False

        while node is not None and node.value != key:
            parent = node
            if key < node.value:
                node = node.left
                is_left_child = True
            else:
                node = node.right
                is_left_child = False

        if node is None:
            logger.debug("key %d not found, nothing removed", key)
            return None

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            logger.debug("removed %d, replaced by successor %d", key, successor.value)
        else:
            replacement = node.left if node.left is not None else node.right
            if parent is None:
                self._root = replacement
            elif is_left_child:
                parent.left = replacement
            else:
                parent.right = replacement
            logger.debug("removed %d, spliced in %r", key, replacement)

        self._size -= 1
        return key

    def contains(self, key: int) -> bool:
        _check_key(key)
        node = self._root
        while node is not None:
            if key < node.value:
                node = node.left
            elif key > node.value:
                node = node.right
            else:
                return True
        return False

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def in_order(self) -> List[int]:
        result: List[int] = []
        stack: List[BinaryTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def as_tree_string(self) -> str:
        """Render the tree rotated a quarter turn counter-clockwise.

        Right subtrees come first, so the largest keys sit at the top and the
        smallest at the bottom. Each line is the indent marker repeated once
        per level of depth, then the key right-aligned::

            -~--~-  7
            -~-  6
            -~--~-  5
              4
            -~--~-  2
            -~-  1
            -~--~-  0
        """
        lines: List[str] = []
        stack: List[Tuple[BinaryTree.Node, int]] = []
        node = self._root
        depth = 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node = node.right
                depth += 1
            node, depth = stack.pop()
            lines.append(f"{self.INDENT * depth}{node.value:>{self.VALUE_WIDTH}}")
            node = node.left
            depth += 1
        return "".join(line + self.EOL for line in lines)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: int) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[int]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"BinaryTree({self.in_order()})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self.in_order()) + "]"


def _check_key(key: int) -> None:
    if key is None:
        raise ValueError("key must not be None")
    # bool is an int subclass but not a valid key
    if isinstance(key, bool) or not isinstance(key, int):
        raise TypeError(f"key must be an int, not {type(key).__name__}")
