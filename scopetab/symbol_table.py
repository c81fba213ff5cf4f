"""A stack of nested scope tables."""

from __future__ import annotations

from typing import Optional, TextIO

from .scope_table import ScopeTable
from .symbol import SymbolInfo


class SymbolTable:
    """Nested scopes; lookups search from the innermost scope outward."""

    def __init__(self, size: int, log: TextIO) -> None:
        self.size = size
        self.log = log
        self._scope_counter = 1
        self._current = ScopeTable(size, str(self._scope_counter), log)

    @property
    def current_scope(self) -> ScopeTable:
        """The innermost scope."""
        return self._current

    def insert(self, symbol: SymbolInfo) -> bool:
        return self._current.insert(symbol)

    def remove(self, name: str) -> bool:
        return self._current.delete(name)

    def lookup(self, name: str) -> Optional[SymbolInfo]:
        scope: Optional[ScopeTable] = self._current
        while scope is not None:
            symbol = scope.lookup(name)
            if symbol is not None:
                return symbol
            scope = scope.parent
        self.log.write(f"\t{name} not found in any of the ScopeTables\n")
        return None

    def enter_scope(self) -> ScopeTable:
        self._scope_counter += 1
        self._current = ScopeTable(
            self.size, str(self._scope_counter), self.log, self._current
        )
        self.log.write(f"\tScopeTable# {self._current.id} created\n")
        return self._current

    def exit_scope(self) -> bool:
        """Drop the innermost scope; the root scope is never removed."""
        parent = self._current.parent
        if parent is None:
            self.log.write("\tCannot delete root ScopeTable\n")
            return False
        self.log.write(f"\tScopeTable# {self._current.id} removed\n")
        self._current = parent
        return True

    def print_current_scope(self) -> None:
        self._current.print_table()

    def print_all_scopes(self) -> None:
        scope: Optional[ScopeTable] = self._current
        depth = 0
        while scope is not None:
            scope.print_table(depth)
            scope = scope.parent
            depth += 1