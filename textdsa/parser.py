"""Parser turning tokenised E++ statements into expression trees."""

from __future__ import annotations

from collections.abc import Sequence

from .exprtree import ExprTreeNode, NodeType, is_number, make_node
from .symtable import SymbolTable


def build_tree(tokens: Sequence[str], start: int, end: int) -> ExprTreeNode:
    """Build the tree for the fully parenthesised expression in tokens[start:end]."""
    length = end - start
    if length < 1:
        raise ValueError("empty expression")
    if length == 1:
        token = tokens[start]
        return make_node(token, int(token) if is_number(token) else 0)
    if tokens[start] != "(" or tokens[end - 1] != ")":
        raise ValueError(f"malformed expression: {' '.join(tokens[start:end])}")

    inner = start + 1
    close = end - 1
    if tokens[inner] == "(":
        depth = 0
        for position in range(inner, close):
            if tokens[position] == "(":
                depth += 1
            elif tokens[position] == ")":
                depth -= 1
                if depth == 0:
                    split = position + 1
                    break
        else:
            raise ValueError("unbalanced parentheses")
    else:
        split = inner + 1

    if split >= close:
        raise ValueError("missing operator")
    node = make_node(tokens[split], 0)
    if not node.is_operator:
        raise ValueError(f"expected an operator, got {tokens[split]!r}")
    node.left = build_tree(tokens, inner, split)
    node.right = build_tree(tokens, split + 1, close)
    return node


class Parser:
    """Parses statements and keeps their trees and the shared symbol table."""

    def __init__(self) -> None:
        self.expr_trees: list[ExprTreeNode] = []
        self.symtable = SymbolTable()

    def parse(self, expression: Sequence[str]) -> ExprTreeNode:
        """Parse one statement of the form `target := expr` and store its tree."""
        if len(expression) < 3:
            raise ValueError("statement is too short")
        head = expression[0]
        if head == "del":
            target = ExprTreeNode(NodeType.DEL, id="DEL")
        elif head == "ret":
            target = ExprTreeNode(NodeType.RET, id="RET")
        else:
            target = ExprTreeNode(NodeType.VAR, id=head)
        root = ExprTreeNode(
            NodeType.ASS,
            id=":=",
            left=target,
            right=build_tree(expression, 2, len(expression)),
        )
        self.expr_trees.append(root)
        return root