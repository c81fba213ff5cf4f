"""A single hash-bucketed scope of symbols."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

from .symbol import SymbolInfo

_MASK64 = (1 << 64) - 1


def sdbm_hash(text: str) -> int:
    """Return the SDBM hash of ``text`` as an unsigned 64-bit integer.

    Bytes are taken from the UTF-8 encoding and treated as signed chars.
    """
    value = 0
    for byte in text.encode("utf-8"):
        char = byte - 256 if byte > 127 else byte
        value = (char + (value << 6) + (value << 16) - value) & _MASK64
    return value


class ScopeTable:
    """Symbols of one scope, kept in hash buckets with chaining."""

    def __init__(
        self,
        size: int,
        id: str,
        log: TextIO,
        parent: Optional[ScopeTable] = None,
    ) -> None:
        if size <= 0:
            raise ValueError("bucket count must be positive")
        self.size = size
        self.id = str(id)
        self.log = log
        self.parent = parent
        self._buckets: list[list[SymbolInfo]] = [[] for _ in range(size)]

    def _index(self, name: str) -> int:
        return sdbm_hash(name) % self.size

    def _write(self, text: str) -> None:
        self.log.write(text + "\n")

    def insert(self, symbol: SymbolInfo) -> bool:
        """Add ``symbol``; return False if its name is already in this scope."""
        index = self._index(symbol.name)
        bucket = self._buckets[index]
        if any(existing.name == symbol.name for existing in bucket):
            self._write(f"\t{symbol.name} already exists in the current ScopeTable")
            return False
        bucket.append(symbol)
        self._write(
            f"\t Inserted in ScopeTable# {self.id} at position {index + 1}, {len(bucket)}"
        )
        return True

    def lookup(self, name: str) -> Optional[SymbolInfo]:
        """Return the symbol called ``name`` in this scope, or None."""
        index = self._index(name)
        for position, symbol in enumerate(self._buckets[index], start=1):
            if symbol.name == name:
                self._write(
                    f"\t{name} found in ScopeTable# {self.id} at position {index + 1}, {position}"
                )
                return symbol
        return None

    def delete(self, name: str) -> bool:
        """Remove the symbol called ``name``; return whether it was present."""
        index = self._index(name)
        bucket = self._buckets[index]
        for position, symbol in enumerate(bucket, start=1):
            if symbol.name == name:
                del bucket[position - 1]
                self._write(
                    f"\tDeleted {name} from the ScopeTable# {self.id} at position {index + 1}, {position}"
                )
                return True
        self._write("\tNot found in the current ScopeTable")
        return False

    def print_table(self, indent: int = 0) -> None:
        """Write every bucket to the log, shifted right by ``indent`` tabs."""
        prefix = "\t" * indent
        self._write(f"{prefix}\tScopeTable# {self.id}")
        for number, bucket in enumerate(self._buckets, start=1):
            entries = "".join(f"{symbol} " for symbol in bucket)
            self._write(f"{prefix}\t{number}---> {entries}")

    def __iter__(self) -> Iterator[SymbolInfo]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)