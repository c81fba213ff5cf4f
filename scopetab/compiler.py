"""Command interpreter that drives a symbol table from a script."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, Optional, Sequence, TextIO

from .symbol import SymbolInfo
from .symbol_table import SymbolTable

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid bucket count: {text!r}")
    return int(match.group(1))


def _split_words(line: str) -> list[str]:
    """Split on single spaces; a trailing empty field is not a word."""
    words = line.split(" ")
    if words and words[-1] == "":
        words.pop()
    return words


def _word(words: Sequence[str], index: int) -> str:
    return words[index] if index < len(words) else ""


def build_type(words: Sequence[str]) -> str:
    """Build the type text of an insert command split into words."""
    kind = _word(words, 2)
    count = len(words)
    if kind == "FUNCTION":
        params = ",".join(words[4:])
        return f"{kind},{_word(words, 3)}<==({params})"
    if kind in ("STRUCT", "UNION"):
        members = []
        for i in range(3, count, 2):
            member = f"({_word(words, i)},{_word(words, i + 1)})"
            if i != count - 2:
                member += ","
            members.append(member)
        return f"{kind},{{{''.join(members)}}}"
    return kind


class Compiler:
    """Runs symbol-table commands; the first line gives the bucket count."""

    def __init__(
        self, lines: Iterable[str], log: TextIO, out: Optional[TextIO] = None
    ) -> None:
        self._lines = iter(lines)
        self.log = log
        self.out = out if out is not None else sys.stdout
        self.command_count = 0
        first = next(self._lines, "")
        self.symbol_table = SymbolTable(_parse_int(first.rstrip("\n")), log)
        log.write(f"\tScopeTable# {self.symbol_table.current_scope.id} created!\n")

    def _say(self, text: str) -> None:
        self.out.write(text + "\n")

    def insert(self, line: str) -> bool:
        words = _split_words(line)
        kind = _word(words, 2)
        self._say(kind)
        symbol_type = build_type(words)
        if kind == "FUNCTION":
            self._say(symbol_type)
        symbol = SymbolInfo(_word(words, 1), symbol_type)
        self._say(str(symbol))
        return self.symbol_table.insert(symbol)

    def lookup(self, line: str) -> Optional[SymbolInfo]:
        words = _split_words(line)
        if len(words) != 2:
            self.log.write("\tNumber of parameters mismatch for the command L\n")
            return None
        symbol = self.symbol_table.lookup(words[1])
        self._say(str(symbol) if symbol is not None else "Not found!")
        return symbol

    def delete(self, line: str) -> bool:
        return self.symbol_table.remove(_word(_split_words(line), 1))

    def print_scopes(self, line: str) -> None:
        target = _word(_split_words(line), 1)
        if target == "C":
            self.symbol_table.print_current_scope()
        elif target == "A":
            self.symbol_table.print_all_scopes()

    def run(self) -> None:
        """Execute every remaining command line."""
        for raw in self._lines:
            line = raw[:-1] if raw.endswith("\n") else raw
            self.command_count += 1
            self.log.write(f"Cmd {self.command_count}: {line}\n")
            command = line[:1]
            if command == "I":
                self.insert(line)
            elif command == "L":
                self.lookup(line)
            elif command == "D":
                self.delete(line)
            elif command == "P":
                self.print_scopes(line)
            elif command == "S":
                self.symbol_table.enter_scope()
            elif command == "E":
                self.symbol_table.exit_scope()


def compile_file(
    input_path: str, output_path: str, out: Optional[TextIO] = None
) -> None:
    """Run the commands in ``input_path`` and write the log to ``output_path``."""
    out = out if out is not None else sys.stdout
    with open(input_path, encoding="utf-8") as source, open(
        output_path, "w", encoding="utf-8"
    ) as log:
        Compiler(source, log, out).run()
    out.write("Closing files!\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run symbol table commands.")
    parser.add_argument("input", nargs="?")
    parser.add_argument("output", nargs="?")
    args = parser.parse_args(argv)
    input_path = args.input or input("Enter the input file Name : ").strip()
    output_path = args.output or input("Enter the output file Name : ").strip()
    try:
        source = open(input_path, encoding="utf-8")
    except OSError:
        print("Failed to open inputFile")
        return 1
    with source:
        try:
            log = open(output_path, "w", encoding="utf-8")
        except OSError:
            print("Failed to open outputFile")
            return 1
        with log:
            Compiler(source, log).run()
    print("Closing files!")
    return 0