"""Expression tree nodes for the E++ language."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum


class NodeType(Enum):
    """Kind of an expression tree node."""

    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    VAL = "VAL"
    VAR = "VAR"
    DEL = "DEL"
    RET = "RET"
    ASS = "ASS"


OPERATORS = {
    "+": NodeType.ADD,
    "-": NodeType.SUB,
    "*": NodeType.MUL,
    "/": NodeType.DIV,
}


@dataclass(eq=False)
class ExprTreeNode:
    """A node of an E++ expression tree."""

    type: NodeType
    id: str = ""
    num: int = 0
    left: ExprTreeNode | None = None
    right: ExprTreeNode | None = None

    @property
    def is_operator(self) -> bool:
        return self.type in OPERATORS.values()


def is_number(token: str) -> bool:
    """Return True if the token is an integer literal, with an optional leading minus."""
    for position, char in enumerate(token):
        if char not in string.digits:
            if position == 0 and char == "-":
                continue
            return False
    return True


def make_node(token: str, value: int) -> ExprTreeNode:
    """Build the node that a single source token stands for."""
    if token in OPERATORS:
        return ExprTreeNode(OPERATORS[token], id=token)
    if is_number(token):
        return ExprTreeNode(NodeType.VAL, num=value)
    if token == ":=":
        return ExprTreeNode(NodeType.ASS, id=token)
    if token == "del":
        return ExprTreeNode(NodeType.DEL, id="DEL")
    if token == "ret":
        return ExprTreeNode(NodeType.RET, id="RET")
    return ExprTreeNode(NodeType.VAR, id=token)