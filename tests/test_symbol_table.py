import io

from scopetab.symbol import SymbolInfo
from scopetab.symbol_table import SymbolTable


def make(size=1):
    log = io.StringIO()
    return SymbolTable(size, log), log


def test_root_scope_id():
    table, _ = make()
    assert table.current_scope.id == "1"
    assert table.current_scope.parent is None


def test_enter_and_exit_scope():
    table, log = make()
    scope = table.enter_scope()
    assert scope is table.current_scope
    assert scope.id == "2"
    assert table.exit_scope()
    assert table.current_scope.id == "1"
    assert log.getvalue().splitlines() == [
        "\tScopeTable# 2 created",
        "\tScopeTable# 2 removed",
    ]


def test_cannot_exit_root():
    table, log = make()
    assert not table.exit_scope()
    assert log.getvalue() == "\tCannot delete root ScopeTable\n"


def test_scope_ids_keep_counting():
    table, _ = make()
    table.enter_scope()
    table.exit_scope()
    assert table.enter_scope().id == "3"


def test_lookup_searches_outward():
    table, _ = make()
    table.insert(SymbolInfo("a", "INT"))
    table.enter_scope()
    table.insert(SymbolInfo("b", "FLOAT"))
    assert table.lookup("a") == SymbolInfo("a", "INT")
    assert table.lookup("b") == SymbolInfo("b", "FLOAT")


def test_inner_shadows_outer():
    table, _ = make()
    table.insert(SymbolInfo("a", "INT"))
    table.enter_scope()
    table.insert(SymbolInfo("a", "FLOAT"))
    assert table.lookup("a").type == "FLOAT"
    table.exit_scope()
    assert table.lookup("a").type == "INT"


def test_lookup_missing_logs():
    table, log = make()
    assert table.lookup("q") is None
    assert log.getvalue() == "\tq not found in any of the ScopeTables\n"


def test_remove_only_current_scope():
    table, _ = make()
    table.insert(SymbolInfo("a", "INT"))
    table.enter_scope()
    assert not table.remove("a")
    table.exit_scope()
    assert table.remove("a")
    assert list(table.current_scope) == []


def test_print_all_scopes_indents_outer():
    table, log = make()
    table.insert(SymbolInfo("a", "INT"))
    table.enter_scope()
    table.insert(SymbolInfo("b", "INT"))
    log.truncate(0)
    log.seek(0)
    table.print_all_scopes()
    assert log.getvalue().splitlines() == [
        "\tScopeTable# 2",
        "\t1---> <b,INT> ",
        "\t\tScopeTable# 1",
        "\t\t1---> <a,INT> ",
    ]


def test_print_current_scope():
    table, log = make()
    table.insert(SymbolInfo("a", "INT"))
    log.truncate(0)
    log.seek(0)
    table.print_current_scope()
    assert log.getvalue().splitlines() == ["\tScopeTable# 1", "\t1---> <a,INT> "]