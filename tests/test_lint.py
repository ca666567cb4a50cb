import pytest

from grammar_solver.grammar import GrammarSolver, InvalidArgument
from grammar_solver.lint import check_grammar, to_fuzzingbook


def test_to_fuzzingbook():
    solver = GrammarSolver(['<s> ::= <a>   <b> | end', '<a> ::= x', '<b> ::= y|'])
    assert to_fuzzingbook(solver) == {
        '<a>': ['x'],
        '<b>': ['y', ''],
        '<s>': ['<a> <b>', 'end'],
    }


def test_to_fuzzingbook_needs_bracketed_symbols():
    with pytest.raises(InvalidArgument):
        to_fuzzingbook(GrammarSolver(['S ::= A B', 'A ::= x', 'B ::= y']))


def test_valid_grammar():
    solver = GrammarSolver(['<s> ::= <a> <b>', '<a> ::= x', '<b> ::= y'])
    assert check_grammar(solver, '<s>')


def test_undefined_symbol():
    solver = GrammarSolver(['<s> ::= <a> <c>', '<a> ::= x'])
    assert not check_grammar(solver, '<s>')


def test_unreachable_symbol():
    solver = GrammarSolver(['<s> ::= <a>', '<a> ::= x', '<b> ::= y'])
    assert not check_grammar(solver, '<s>')
