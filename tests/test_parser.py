import pytest

from textdsa.exprtree import NodeType
from textdsa.parser import Parser, build_tree


def test_single_leaf_number():
    node = build_tree(["17"], 0, 1)
    assert node.type is NodeType.VAL
    assert node.num == 17


def test_simple_binary():
    node = build_tree(["(", "a", "+", "1", ")"], 0, 5)
    assert node.type is NodeType.ADD
    assert node.left.type is NodeType.VAR and node.left.id == "a"
    assert node.right.type is NodeType.VAL and node.right.num == 1


def test_nested_left_and_right():
    tokens = "( ( a - b ) * ( c / 4 ) )".split()
    node = build_tree(tokens, 0, len(tokens))
    assert node.type is NodeType.MUL
    assert node.left.type is NodeType.SUB
    assert (node.left.left.id, node.left.right.id) == ("a", "b")
    assert node.right.type is NodeType.DIV
    assert node.right.left.id == "c"
    assert node.right.right.num == 4


def test_subrange_of_statement():
    tokens = ["x", ":=", "(", "y", "+", "-3", ")"]
    node = build_tree(tokens, 2, len(tokens))
    assert node.type is NodeType.ADD
    assert node.right.num == -3


@pytest.mark.parametrize(
    "tokens",
    [
        ["(", "a", "+", ")"],
        ["(", "a", "b", ")"],
        ["a", "+", "b"],
        ["(", "(", "a", "+", "b", ")"],
        ["-"],
    ],
)
def test_malformed_raises(tokens):
    with pytest.raises(ValueError):
        build_tree(tokens, 0, len(tokens))


def test_parse_assignment():
    parser = Parser()
    root = parser.parse(["x", ":=", "5"])
    assert root.type is NodeType.ASS
    assert root.left.type is NodeType.VAR and root.left.id == "x"
    assert root.right.type is NodeType.VAL and root.right.num == 5
    assert parser.expr_trees == [root]


def test_parse_del_and_ret():
    parser = Parser()
    deleted = parser.parse(["del", ":=", "x"])
    returned = parser.parse(["ret", ":=", "(", "x", "*", "2", ")"])
    assert deleted.left.type is NodeType.DEL
    assert deleted.right.id == "x"
    assert returned.left.type is NodeType.RET
    assert returned.right.type is NodeType.MUL
    assert len(parser.expr_trees) == 2
    assert parser.expr_trees[-1] is returned


def test_parse_short_statement_raises():
    with pytest.raises(ValueError):
        Parser().parse(["x", ":="])