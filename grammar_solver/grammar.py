from typing import Dict, Tuple, List, Optional, Sequence
import random

# A grammar in Backus-Naur form, e.g.
#
#   <s>  ::= <np> <vp>
#   <np> ::= <dp> <n> | <pn>
#
# Each alternative is a whitespace separated list of tokens. Tokens that are
# not declared on a left-hand side are terminals and are emitted verbatim.

ASSIGN = '::='
OR = '|'

Alternative = Tuple[str, ...]
RuleSet = Tuple[Alternative, ...]
Grammar = Dict[str, RuleSet]


class InvalidArgument(ValueError):
    pass


def read_rules(path) -> List[str]:
    # One declaration per line, blank lines are ignored
    with open(path, 'r') as f:
        return [line.rstrip('\n') for line in f if line.strip()]


class GrammarSolver(object):
    """Random sentence generator for a BNF grammar.

    The solver is immutable once built. Derivations draw from ``rng``, which
    lives as long as the solver; pass a seeded ``random.Random`` for
    reproducible output. ``random.Random`` calls are atomic under the GIL, so
    one solver may be shared between threads; give each thread its own solver
    when every thread needs its own reproducible sequence.

    Grammars where a non-terminal can only expand back into itself never
    terminate and end in ``RecursionError``.
    """

    def __init__(self, rules: Sequence[str], rng: Optional[random.Random] = None):
        if not rules:
            raise InvalidArgument('Grammar must have at least one rule')

        self.rng = rng if rng is not None else random.Random()
        self._grammar: Grammar = {}
        self.start_symbol = None

        for rule in rules:
            if ASSIGN not in rule:
                raise InvalidArgument(f'Rule is missing "{ASSIGN}": {rule!r}')
            symbol, expansions = rule.split(ASSIGN, 1)
            symbol = symbol.strip()

            if not symbol:
                raise InvalidArgument(f'Rule has no non-terminal: {rule!r}')
            if symbol in self._grammar:
                raise InvalidArgument(f'Duplicate non-terminal: {symbol}')

            # By convention the first declaration is the start symbol
            if self.start_symbol is None:
                self.start_symbol = symbol
            self._grammar[symbol] = tuple(tuple(alternative.split())
                                          for alternative in expansions.split(OR))

    def contains(self, symbol: str) -> bool:
        check_symbol(symbol)
        return symbol in self._grammar

    def __contains__(self, symbol):
        # Unlike contains(), membership tests never raise
        return isinstance(symbol, str) and symbol in self._grammar

    def get_symbols(self) -> Tuple[str, ...]:
        return tuple(sorted(self._grammar))

    def alternatives(self, symbol: str) -> RuleSet:
        if not self.contains(symbol):
            raise InvalidArgument(f'Unknown non-terminal: {symbol}')
        return self._grammar[symbol]

    def generate(self, symbol: str) -> str:
        check_symbol(symbol)

        # Anything that was never declared is a terminal
        if symbol not in self._grammar:
            return symbol

        alternative = self.rng.choice(self._grammar[symbol])
        parts = [self.generate(token) for token in alternative]

        # Empty alternatives derive to '', drop them so words stay single spaced
        return ' '.join(part for part in parts if part)


def check_symbol(symbol):
    if not isinstance(symbol, str) or not symbol:
        raise InvalidArgument('Symbol must be a non-empty string')
