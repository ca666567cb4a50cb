from grammar_solver.grammar import GrammarSolver, InvalidArgument, read_rules
