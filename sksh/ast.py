"""Command lines joined by &&, || and parentheses, evaluated as they are read."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, TextIO

from sksh.errors import ShellError, report

_WHITESPACE = "\t\n\v\f\r "
_OPERATOR_CHARS = "&|"
INTERRUPTED = 130
NOT_RUN = -1

SYNTAX_ERROR = "Syntax error\n"
UNEXPECTED_CLOSE = "Unexpected token around ')'\n"

Executor = Callable[[str], int]


class NodeType(enum.Enum):
    """Kinds of node in a command tree."""

    EMPTY = enum.auto()
    VAL = enum.auto()
    AND = enum.auto()
    OR = enum.auto()


def _skip_whitespace(text: str, start: int) -> int:
    index = start
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    return index


def command_length(text: str, start: int = 0) -> int:
    """Index where the command beginning at *start* ends.

    A command stops at '&', '||', '(' or ')' outside quotes, or at the end of
    *text*; a single '|' (a pipe) belongs to the command.
    """
    index = start
    size = len(text)
    while index < size:
        if text[index] == "'":
            index += 1
            while index < size and text[index] != "'":
                index += 1
        if index < size and text[index] == '"':
            index += 1
            while index < size and text[index] != '"':
                index += 1
        if index >= size:
            break
        ch = text[index]
        if ch in "&()" or (ch == "|" and text[index + 1:index + 2] == "|"):
            break
        index += 1
    return index


def _continues(status: int, node_type: NodeType) -> bool:
    """Whether an operator node with *status* so far goes on to its right side."""
    if status == INTERRUPTED:
        return False
    return (status == 0 and node_type is NodeType.AND) or (
        status != 0 and node_type is NodeType.OR
    )


@dataclass(eq=False)
class Node:
    """One node of the command tree: a command, an operator or a group."""

    type: NodeType = NodeType.EMPTY
    value: str | None = None
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = None
    right: Node | None = None
    res: int = NOT_RUN

    def add_child(self) -> Node:
        """Attach a new empty child, on the left if free, else on the right."""
        child = Node(parent=self)
        if self.left is None:
            self.left = child
        else:
            self.right = child
        return child

    def fill(self, text: str) -> int:
        """Make this node the command at the start of *text*; return characters used."""
        start = _skip_whitespace(text, 0)
        end = command_length(text, start)
        self.type = NodeType.VAL
        self.value = text[start:end]
        return end


class CommandLine:
    """Parses a line and runs its commands through *execute*, honouring && and ||."""

    def __init__(self, execute: Executor, err: TextIO | None = None) -> None:
        self.execute = execute
        self.err = err

    def _run_command(self, node: Node) -> int:
        command = node.value or ""
        if not command.strip(_WHITESPACE):
            return NOT_RUN
        return self.execute(command)

    def evaluate(self, node: Node) -> int:
        """Evaluate the tree under *node* and return its status."""
        parent = node.parent
        if node.type is NodeType.VAL and (
            parent is None
            or (
                parent.res != INTERRUPTED
                and (parent.res == NOT_RUN or _continues(parent.res, parent.type))
            )
        ):
            node.res = self._run_command(node)
            if parent is not None:
                parent.res = node.res
            return node.res
        if node.left is not None:
            node.res = self.evaluate(node.left)
            if node.right is not None and _continues(node.res, node.type):
                node.res = self.evaluate(node.right)
            return node.res
        return parent.res if parent is not None else node.res

    def _set_operator(
        self, curr: Node, op: NodeType, text: str
    ) -> tuple[Node, int]:
        owner = curr.parent
        if owner is None:
            raise ShellError(SYNTAX_ERROR)
        if owner.type is not NodeType.EMPTY:
            if owner.left is not None:
                owner.res = self.evaluate(owner.left)
            if owner.right is not None and _continues(owner.res, owner.type):
                owner.res = self.evaluate(owner.right)
            owner.left = None
            owner.right = None
        owner.type = op
        index = _skip_whitespace(text, 2)
        if index < len(text) and text[index] in _OPERATOR_CHARS:
            raise ShellError(SYNTAX_ERROR)
        return owner, index

    def _parse(self, text: str, curr: Node) -> tuple[Node, int]:
        if text.startswith("("):
            return curr.add_child(), 1
        if text.startswith("&&"):
            return self._set_operator(curr, NodeType.AND, text)
        if text.startswith("||"):
            return self._set_operator(curr, NodeType.OR, text)
        if text.startswith(")"):
            if curr.parent is None:
                raise ShellError(UNEXPECTED_CLOSE)
            index = _skip_whitespace(text, 1)
            if index < len(text) and text[index] not in "|&)":
                raise ShellError(SYNTAX_ERROR)
            return curr.parent, index
        child = curr.add_child()
        used = child.fill(text)
        if used == 0:
            raise ShellError(SYNTAX_ERROR)
        return child, used

    def run(self, line: str) -> int | None:
        """Parse and run *line*; return its status, or None after a syntax error.

        Commands before the point of a syntax error may already have run.
        """
        root = Node()
        curr = root
        position = 0
        try:
            while position < len(line):
                curr, used = self._parse(line[position:], curr)
                position += used
        except ShellError as exc:
            report(exc.message, self.err)
            return None
        return self.evaluate(root)


def run_line(line: str, execute: Executor, err: TextIO | None = None) -> int | None:
    """Run one command line with *execute*; see CommandLine.run."""
    return CommandLine(execute, err).run(line)