"""Symbol entries stored in scope tables."""

from dataclasses import dataclass


@dataclass
class SymbolInfo:
    """A named symbol together with its type description."""

    name: str = ""
    type: str = ""

    def __str__(self) -> str:
        return f"<{self.name},{self.type}>"