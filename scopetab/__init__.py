"""Nested-scope symbol tables on chained hash tables, with a command runner."""

__version__ = "0.1.0"
__all__ = ["compiler", "scope_table", "symbol", "symbol_table"]