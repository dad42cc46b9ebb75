"""AVL-tree symbol table mapping variable names to memory addresses."""

from __future__ import annotations

from dataclasses import dataclass


def _height(node: SymNode | None) -> int:
    return node.height if node is not None else 0


def _balance(node: SymNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


@dataclass(eq=False)
class SymNode:
    """A node of the symbol table; address is -1 until assigned."""

    key: str
    address: int = -1
    height: int = 1
    left: SymNode | None = None
    right: SymNode | None = None

    def _refresh(self) -> None:
        self.height = 1 + max(_height(self.left), _height(self.right))

    def rotate_left(self) -> SymNode:
        """Lift the right child into this node's place and return it."""
        new_root = self.right
        self.right = new_root.left
        new_root.left = self
        self._refresh()
        new_root._refresh()
        return new_root

    def rotate_right(self) -> SymNode:
        """Lift the left child into this node's place and return it."""
        new_root = self.left
        self.left = new_root.right
        new_root.right = self
        self._refresh()
        new_root._refresh()
        return new_root

    def rotate_left_right(self) -> SymNode:
        self.left = self.left.rotate_left()
        return self.rotate_right()

    def rotate_right_left(self) -> SymNode:
        self.right = self.right.rotate_right()
        return self.rotate_left()


def _rebalance(node: SymNode) -> SymNode:
    node._refresh()
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            return node.rotate_left_right()
        return node.rotate_right()
    if balance < -1:
        if _balance(node.right) > 0:
            return node.rotate_right_left()
        return node.rotate_left()
    return node


def _insert(node: SymNode | None, key: str) -> SymNode:
    if node is None:
        return SymNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node
    return _rebalance(node)


def _remove(node: SymNode | None, key: str) -> SymNode | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _remove(node.left, key)
    elif key > node.key:
        node.right = _remove(node.right, key)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.address = successor.address
        node.right = _remove(node.right, successor.key)
    return _rebalance(node)


class SymbolTable:
    """Balanced search tree of variable names and their memory addresses."""

    def __init__(self) -> None:
        self.root: SymNode | None = None
        self._size = 0

    def _find(self, key: str) -> SymNode | None:
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def _require(self, key: str) -> SymNode:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node

    def insert(self, key: str) -> None:
        """Add a key with no address; an existing key is left as it is."""
        if key in self:
            return
        self.root = _insert(self.root, key)
        self._size += 1

    def remove(self, key: str) -> None:
        """Remove a key and its address; raise KeyError if it is absent."""
        self._require(key)
        self.root = _remove(self.root, key)
        self._size -= 1

    def search(self, key: str) -> int:
        """Return the address of a key (-1 if unassigned); raise KeyError if absent."""
        return self._require(key).address

    def assign_address(self, key: str, address: int) -> None:
        self._require(key).address = address

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None