"""A self-balancing (AVL) binary search tree of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("value", "height", "left", "right")

    def __init__(self, value: int) -> None:
        self.value = value
        self.height = 0
        self.left: _Node | None = None
        self.right: _Node | None = None


def _height(node: _Node | None) -> int:
    return -1 if node is None else node.height


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _refresh(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_ll(a: _Node) -> _Node:
    b = a.left
    assert b is not None
    a.left = b.right
    b.right = a
    _refresh(a)
    b.height = max(_height(b.left), a.height) + 1
    return b


def _rotate_rr(a: _Node) -> _Node:
    b = a.right
    assert b is not None
    a.right = b.left
    b.left = a
    _refresh(a)
    b.height = max(_height(b.right), a.height) + 1
    return b


def _rotate_lr(a: _Node) -> _Node:
    assert a.left is not None
    a.left = _rotate_rr(a.left)
    return _rotate_ll(a)


def _rotate_rl(a: _Node) -> _Node:
    assert a.right is not None
    a.right = _rotate_ll(a.right)
    return _rotate_rr(a)


def _fix_left_heavy(node: _Node) -> _Node:
    assert node.left is not None
    if _balance(node.left) >= 0:
        return _rotate_ll(node)
    return _rotate_lr(node)


def _fix_right_heavy(node: _Node) -> _Node:
    assert node.right is not None
    if _balance(node.right) <= 0:
        return _rotate_rr(node)
    return _rotate_rl(node)


def _insert(node: _Node | None, value: int) -> tuple[_Node, bool]:
    if node is None:
        return _Node(value), True
    if value < node.value:
        node.left, added = _insert(node.left, value)
        if added and _balance(node) == 2:
            node = _fix_left_heavy(node)
    elif value > node.value:
        node.right, added = _insert(node.right, value)
        if added and _balance(node) == -2:
            node = _fix_right_heavy(node)
    else:
        return node, False
    _refresh(node)
    return node, added


def _smallest(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _remove(node: _Node | None, value: int) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if value < node.value:
        node.left, removed = _remove(node.left, value)
        if removed and _balance(node) == -2:
            node = _fix_right_heavy(node)
    elif value > node.value:
        node.right, removed = _remove(node.right, value)
        if removed and _balance(node) == 2:
            node = _fix_left_heavy(node)
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = _smallest(node.right)
        node.value = successor.value
        node.right, removed = _remove(node.right, successor.value)
        if removed and _balance(node) == 2:
            node = _fix_left_heavy(node)
    if removed:
        _refresh(node)
    return node, removed


class AVLTree:
    """An AVL tree holding distinct integers."""

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values or ():
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert a value; return False if it was already present."""
        self._root, added = _insert(self._root, value)
        if added:
            self._size += 1
        return added

    def remove(self, value: int) -> bool:
        """Remove a value; return False if it was not present."""
        self._root, removed = _remove(self._root, value)
        if removed:
            self._size -= 1
        return removed

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.right if value > node.value else node.left  # type: ignore[operator]
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return self.inorder()

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self._root) + 1

    def preorder(self) -> Iterator[tuple[int, int]]:
        """Yield (value, node height) pairs in pre-order."""
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            yield node.value, node.height
            stack.append(node.right)
            stack.append(node.left)

    def inorder(self) -> Iterator[int]:
        """Yield values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order."""
        out: list[int] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            out.append(node.value)
            stack.append(node.left)
            stack.append(node.right)
        yield from reversed(out)

    def __repr__(self) -> str:
        return f"AVLTree({list(self.inorder())!r})"