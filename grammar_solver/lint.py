from fuzzingbook.Grammars import is_valid_grammar
from typing import Dict, List
import re

from grammar_solver.grammar import GrammarSolver, InvalidArgument

# fuzzingbook only recognizes non-terminals of the form <name>
RE_NONTERMINAL = re.compile(r'<[^<> ]*>')

FuzzingbookGrammar = Dict[str, List[str]]


def to_fuzzingbook(solver: GrammarSolver) -> FuzzingbookGrammar:
    grammar: FuzzingbookGrammar = {}
    for symbol in solver.get_symbols():
        if not RE_NONTERMINAL.fullmatch(symbol):
            raise InvalidArgument(f'Not a fuzzingbook non-terminal: {symbol}')
        grammar[symbol] = [' '.join(alternative)
                           for alternative in solver.alternatives(symbol)]
    return grammar


def check_grammar(solver: GrammarSolver, start_symbol: str) -> bool:
    # Reports undefined and unreachable symbols on stderr
    return is_valid_grammar(to_fuzzingbook(solver), start_symbol=start_symbol)
