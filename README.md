# scopetab

A symbol table made of nested scopes. Each scope is a fixed-size hash table
with chained buckets, indexed by the SDBM hash of a symbol's name. A small
command language drives the table and every step is logged to an output file.

## Installing

```
pip install .
```

## Command line

```
scopetab [INPUT] [OUTPUT]
```

`INPUT` is the command file and `OUTPUT` the log file to write. Any of the two
left out on the command line is asked for at the prompt. If the input file
cannot be opened the program prints `Failed to open inputFile` and exits with
status 1; the same goes for the output file (`Failed to open outputFile`).
When the run is done it prints `Closing files!`.

While running, each insert echoes the symbol's kind and the symbol itself
(`<name,type>`) on standard output, and each lookup prints the symbol found or
`Not found!`. Everything else goes to the log file.

### Input format

The first line holds the number of buckets per scope (a leading integer; a line
without one is an error). Each line after that is one command, its words
separated by single spaces:

| Command | Meaning |
|---------|---------|
| `I name type` | insert a symbol into the current scope |
| `I name FUNCTION ret arg1 arg2 ...` | insert a function; its type is `FUNCTION,ret<==(arg1,arg2,...)` |
| `I name STRUCT t1 f1 t2 f2 ...` | insert a struct (or `UNION`); its type is `STRUCT,{(t1,f1),(t2,f2)}` |
| `L name` | look a name up, from the current scope outward |
| `D name` | delete a name from the current scope |
| `P C` / `P A` | print the current scope / all scopes, innermost first |
| `S` | enter a new scope |
| `E` | exit the current scope (the root scope cannot be removed) |

Lines starting with any other character are logged as commands and otherwise
ignored. A lookup with other than exactly one name logs
`Number of parameters mismatch for the command L`.

Example input:

```
7
I foo FUNCTION INT INT FLOAT
I x INT
S
I y FLOAT
L x
P A
E
```

## Library use

```python
import io
from scopetab.symbol import SymbolInfo
from scopetab.symbol_table import SymbolTable

log = io.StringIO()
table = SymbolTable(7, log)
table.insert(SymbolInfo("x", "INT"))
table.enter_scope()
found = table.lookup("x")
print(found)           # <x,INT>
table.exit_scope()
print(log.getvalue())
```

The modules:

- `scopetab.symbol` — `SymbolInfo`, a dataclass with `name` and `type`.
- `scopetab.scope_table` — `sdbm_hash(text)` and `ScopeTable`, one scope with
  `insert`, `lookup`, `delete`, `print_table`, iteration and `len()`.
- `scopetab.symbol_table` — `SymbolTable`, a chain of scopes with `insert`,
  `remove`, `lookup`, `enter_scope`, `exit_scope`, `print_current_scope`,
  `print_all_scopes` and the `current_scope` property.
- `scopetab.compiler` — `build_type(words)`, the `Compiler` command runner,
  `compile_file(input_path, output_path, out=None)` and `main(argv=None)`.

To run a whole command file from code, call
`compile_file(input_path, output_path)`, or feed lines straight to
`Compiler(lines, log, out).run()`, where the first line is the bucket count.

## What it does not do

Despite the module name `compiler`, nothing here reads program source code:
there is no lexer or parser. The package only maintains the symbol table
through the command language above, and keeps it in memory for one run.

## Tests

```
pip install .[test]
pytest
```