"""The shell's environment: an ordered list of NAME=value entries."""

from __future__ import annotations

from typing import Iterable, Iterator

from sksh.errors import ShellError
from sksh.text import isalnum, isalpha

_STATUS_PREFIX = "?="
INVALID_IDENTIFIER = "not a valid identifier\n"


def _name_of(entry: str) -> str:
    return entry.split("=", 1)[0]


def is_valid_identifier(var: str, allow_status: bool = False) -> bool:
    """Check the name part of *var* (up to '=') against [A-Za-z_][A-Za-z0-9_]*.

    With *allow_status* the name may also start with '?', the slot that holds
    the last exit status.
    """
    if not var:
        return False
    first = var[0]
    if not (isalpha(first) or first == "_" or (first == "?" and allow_status)):
        return False
    return all(isalnum(ch) or ch == "_" for ch in _name_of(var)[1:])


class Environment:
    """Variables kept in insertion order as NAME=value strings."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    def _index(self, name: str) -> int | None:
        for position, entry in enumerate(self._entries):
            if "=" in entry and _name_of(entry) == name:
                return position
        return None

    def get(self, name: str) -> str | None:
        """Return the value of *name*, or None if it is not set."""
        position = self._index(name)
        if position is None:
            return None
        return self._entries[position].split("=", 1)[1]

    def set_var(self, assignment: str, allow_status: bool = False) -> None:
        """Add or replace the variable given as NAME=value.

        Raises ShellError when the name is not a valid identifier.
        """
        if not is_valid_identifier(assignment, allow_status):
            raise ShellError(INVALID_IDENTIFIER)
        position = self._index(_name_of(assignment))
        if position is None:
            self._entries.append(assignment)
        else:
            self._entries[position] = assignment

    def unset(self, name: str) -> bool:
        """Remove every entry for *name*; return whether anything was removed."""
        if self.get(name) is None:
            return False
        self._entries = [
            entry
            for entry in self._entries
            if not ("=" in entry and _name_of(entry) == name)
        ]
        return True

    def copy(self) -> Environment:
        """Return an independent copy of this environment."""
        return Environment(self._entries)

    def visible_lines(self) -> list[str]:
        """Entries as `env` prints them: all but the exit-status slot."""
        return [e for e in self._entries if not e.startswith(_STATUS_PREFIX)]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)