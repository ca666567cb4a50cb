from tqdm import tqdm
import sys
import time

from grammar_solver.config import Config
from grammar_solver.grammar import GrammarSolver, read_rules
from grammar_solver.lint import check_grammar
from grammar_solver.random_utils import make_random

DEFAULT_CONFIG = 'config.json'


def prompt_symbols(solver):
    # Keep asking until the user enters a blank line
    while True:
        print('\nAvailable symbols to generate are:')
        print(', '.join(solver.get_symbols()))
        symbol = input('What do you want generated (return to quit)? ').strip()
        if not symbol:
            return
        yield symbol


def derive(solver, symbol, count):
    return [solver.generate(symbol) for _ in tqdm(range(count), desc=symbol)]


def print_sentences(symbol, sentences):
    print(f'\n--- {symbol} ---\n')
    for i, sentence in enumerate(sentences):
        print(f'{i+1}: {sentence}')


def main(argv=None):
    argv = sys.argv if argv is None else argv

    # Use command argument as config file path if specified, otherwise use default
    if len(argv) == 1:
        print('Using default configuration file:', DEFAULT_CONFIG)
        config_path = DEFAULT_CONFIG
    else:
        print('Using specified configuration file:', argv[1])
        config_path = argv[1]
    config = Config(config_path)

    rng, seed = make_random(config.seed)
    if config.seed is not None:
        print('Using random seed specified in configuration file:', seed)
    else:
        print('No random seed specified, defaulting to current timestamp as seed:', seed)

    solver = GrammarSolver(read_rules(config.grammar), rng)
    print(f'Loaded {len(solver.get_symbols())} non-terminals from {config.grammar}')

    if config.check:
        start_symbol = config.symbols[0] if config.symbols else solver.start_symbol
        if check_grammar(solver, start_symbol):
            print(f'Grammar is valid from {start_symbol} ✓')
        else:
            print(f'Grammar has problems from {start_symbol} ❌ (see above)')

    symbols = config.symbols if config.symbols else prompt_symbols(solver)

    tic = time.perf_counter()
    num_symbols = 0
    num_sentences = 0
    for symbol in symbols:
        sentences = derive(solver, symbol, config.count)
        print_sentences(symbol, sentences)
        num_symbols += 1
        num_sentences += len(sentences)
    toc = time.perf_counter()

    print('\n---------- GRAMMAR SOLVER RESULTS -------------\n')
    print(f'{num_sentences} sentences for {num_symbols} symbols in {toc - tic:0.4f} seconds')
    print(f'Random seed: {seed}')
    print('\n-----------------------------------------------')
    return 0


if __name__ == '__main__':
    sys.exit(main())
