"""Compiler from E++ statements to stack-machine target commands."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

from .exprtree import ExprTreeNode, NodeType
from .parser import Parser


class EPPError(Exception):
    """Raised for invalid E++ programs."""


class EPPCompiler:
    """Compiles E++ statements, appending target commands to an output file."""

    def __init__(self, output_file: str, memory_limit: int) -> None:
        self.output_file = output_file
        self.memory_limit = memory_limit
        self._parser = Parser()
        self._free = list(range(memory_limit))

    def compile(self, code: Iterable[Sequence[str]]) -> list[str]:
        """Compile each statement, write its commands, and return all commands."""
        table = self._parser.symtable
        emitted: list[str] = []
        for statement in code:
            try:
                self._parser.parse(statement)
            except ValueError as exc:
                raise EPPError(str(exc)) from exc
            head = statement[0]
            if head == "del":
                name = statement[2]
                if name not in table:
                    raise EPPError(f"cannot delete undefined variable {name!r}")
                self._free.append(table.search(name))
                commands = self.generate_targ_commands()
                table.remove(name)
            elif head != "ret":
                if head not in table:
                    if not self._free:
                        raise EPPError("out of memory")
                    table.insert(head)
                    table.assign_address(head, self._free.pop())
                commands = self.generate_targ_commands()
            else:
                commands = self.generate_targ_commands()
            self.write_to_file(commands)
            emitted.extend(commands)
        return emitted

    def _address(self, name: str) -> int:
        try:
            return self._parser.symtable.search(name)
        except KeyError:
            raise EPPError(f"undefined variable {name!r}") from None

    def _postorder(self, node: ExprTreeNode | None) -> Iterator[str]:
        if node is None:
            return
        if node.type is NodeType.VAL:
            yield f"PUSH {node.num}"
        elif node.type is NodeType.VAR:
            yield f"PUSH mem[{self._address(node.id)}]"
        elif node.is_operator:
            yield from self._postorder(node.right)
            yield from self._postorder(node.left)
            yield node.type.value

    def generate_targ_commands(self) -> list[str]:
        """Return the target commands for the most recently parsed statement."""
        if not self._parser.expr_trees:
            raise EPPError("no statement has been parsed")
        tree = self._parser.expr_trees[-1]
        target = tree.left
        if target.type is NodeType.VAR:
            commands = list(self._postorder(tree.right))
            commands.append(f"mem[{self._address(target.id)}] = POP")
        elif target.type is NodeType.DEL:
            commands = [f"DEL = mem[{self._address(tree.right.id)}]"]
        else:
            commands = list(self._postorder(tree.right))
            commands.append("RET = POP")
        return commands

    def write_to_file(self, commands: Iterable[str]) -> None:
        with open(self.output_file, "a", encoding="utf-8") as handle:
            for command in commands:
                handle.write(command + "\n")


def parse_line(line: str) -> list[str]:
    """Split a source line into whitespace-separated tokens."""
    return line.split()


def validate_expression(expression: Sequence[str], line_number: int) -> None:
    """Raise EPPError unless the statement has `:=` second and balanced parentheses."""
    valid = len(expression) > 1 and expression[1] == ":="
    depth = 0
    for token in expression:
        if token == "(":
            depth += 1
        elif token == ")":
            depth -= 1
        if depth < 0:
            valid = False
    if not valid or depth != 0:
        raise EPPError(f"Invalid E++ expression at line {line_number}")


def read_program(lines: Iterable[str]) -> list[list[str]]:
    """Tokenise and validate a program, skipping blank lines."""
    code = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        expression = parse_line(line)
        validate_expression(expression, line_number)
        code.append(expression)
    return code


def memory_needed(code: Iterable[Sequence[str]]) -> int:
    """Return the largest number of live assignments at any point in the program."""
    live = 0
    most = 0
    for expression in code:
        if expression[0] == "del":
            live -= 1
        elif expression[0] == "ret":
            continue
        else:
            live += 1
        most = max(most, live)
    return most


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: e++ <input_file>", file=sys.stderr)
        return 1
    path = args[0]
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        print(f"Error opening the file: {path}", file=sys.stderr)
        return 1

    try:
        code = read_program(lines)
    except EPPError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if not code:
        return 0
    if code[-1][0] != "ret":
        print(
            f"Error: Last E++ expression should be of return type {len(lines)}",
            file=sys.stderr,
        )
        return 1

    try:
        EPPCompiler("targ.txt", memory_needed(code)).compile(code)
    except EPPError as exc:
        print(
            "Error: The compiler threw the below error while compiling the code:",
            file=sys.stderr,
        )
        print(exc, file=sys.stderr)
        return 1

    print(f"Targ code for file {path} generated successfully")
    return 0