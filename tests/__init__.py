# --------------------------------------------------------------------
# Requirements: torch, pytest
# --------------------------------------------------------------------
"""
rpsearch Test Suite

Run everything with:
	pytest tests/

MODULES:
	test_functions.py     # Benchmark landscapes, bounds, factory, open set
	test_operators.py     # Uniform crossover and mutation
	test_selection.py     # Exhaustive pairwise and iterative local search
	test_builder.py       # Recursive builder counts, validation, determinism
	test_benchmark.py     # Depth x size sweep, configs, logger, round tracker
"""
