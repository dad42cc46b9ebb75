import pytest

from textdsa.exprtree import ExprTreeNode, NodeType, is_number, make_node


@pytest.mark.parametrize(
    "token, expected",
    [("+", NodeType.ADD), ("-", NodeType.SUB), ("*", NodeType.MUL), ("/", NodeType.DIV)],
)
def test_operators(token, expected):
    node = make_node(token, 0)
    assert node.type is expected
    assert node.is_operator


def test_positive_number():
    node = make_node("42", 42)
    assert node.type is NodeType.VAL
    assert node.num == 42
    assert not node.is_operator


def test_negative_number():
    node = make_node("-7", -7)
    assert node.type is NodeType.VAL
    assert node.num == -7


def test_variable():
    node = make_node("alpha", 0)
    assert node.type is NodeType.VAR
    assert node.id == "alpha"


def test_assignment_and_keywords():
    assert make_node(":=", 0).type is NodeType.ASS
    delete = make_node("del", 0)
    assert delete.type is NodeType.DEL and delete.id == "DEL"
    ret = make_node("ret", 0)
    assert ret.type is NodeType.RET and ret.id == "RET"


@pytest.mark.parametrize(
    "token, expected",
    [("123", True), ("-5", True), ("0", True), ("5-", False), ("a1", False), ("--1", False), ("x", False)],
)
def test_is_number(token, expected):
    assert is_number(token) is expected


def test_children_default_to_none():
    node = ExprTreeNode(NodeType.ADD)
    assert node.left is None and node.right is None
    assert node.num == 0