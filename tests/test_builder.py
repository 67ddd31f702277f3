"""
Tests for the recursive solution builder.

Run with: pytest tests/test_builder.py
"""

import pytest
import torch

from rpsearch import (
	ExhaustivePairwise,
	IterativeLocalSearch,
	ObjectiveFunctionFactory,
	Rastrigin,
	RecursiveSolutionBuilder,
	SearchConfig,
	SearchContext,
	SelectionStrategyBase,
)


class ForbiddenSelection(SelectionStrategyBase):
	"""Fails the test if the builder ever asks it for a winner."""

	@property
	def name(self) -> str:
		return "Forbidden"

	def best(self, population, function, context):
		raise AssertionError("selection must not be consulted at depth 0")


@pytest.mark.parametrize("function", ObjectiveFunctionFactory.create_all(), ids=lambda f: f.title())
def test_depth_zero_samples_inside_domain_and_ignores_selection(function):
	builder = RecursiveSolutionBuilder()
	context = SearchContext.seeded(3)
	vector = builder.solution(0, 7, ForbiddenSelection(), function, context)

	assert vector.shape == (100,)
	assert vector.dtype == torch.float64
	assert (vector >= function.minimum()).all()
	assert (vector <= function.maximum()).all()
	assert context.evaluations == 0
	assert context.leaf_solutions == 1


@pytest.mark.parametrize("depth, size", [(1, 3), (2, 2), (3, 3), (2, 4), (4, 2)])
def test_leaf_and_call_counts(depth, size):
	builder = RecursiveSolutionBuilder(SearchConfig(input_size=5))
	context = SearchContext.seeded(depth * 10 + size)
	builder.solution(depth, size, ExhaustivePairwise(), Rastrigin(), context)

	assert context.leaf_solutions == size ** depth
	assert context.solution_calls == (size ** (depth + 1) - 1) // (size - 1)
	# One exhaustive pass of size^2 children per internal node
	internal_nodes = context.solution_calls - context.leaf_solutions
	assert context.evaluations == internal_nodes * size * size
	assert context.selection_rounds == internal_nodes


def test_size_one_is_a_chain():
	builder = RecursiveSolutionBuilder(SearchConfig(input_size=5))
	context = SearchContext.seeded(0)
	builder.solution(4, 1, ExhaustivePairwise(), Rastrigin(), context)
	assert context.leaf_solutions == 1
	assert context.solution_calls == 5
	assert context.evaluations == 4


def test_result_has_configured_length():
	builder = RecursiveSolutionBuilder(SearchConfig(input_size=17))
	vector = builder.solution(2, 3, ExhaustivePairwise(), Rastrigin(), SearchContext.seeded(5))
	assert vector.shape == (17,)


@pytest.mark.parametrize("depth, size", [(-1, 2), (2, 0), (0, -3)])
def test_invalid_arguments_are_rejected(depth, size):
	builder = RecursiveSolutionBuilder()
	with pytest.raises(ValueError):
		builder.solution(depth, size, ExhaustivePairwise(), Rastrigin(), SearchContext.seeded(0))


def test_end_to_end_depth_one_is_reproducible(recording_rastrigin):
	builder = RecursiveSolutionBuilder()
	selection = ExhaustivePairwise()

	first = builder.run(1, 2, selection, recording_rastrigin, SearchContext.seeded(2024))
	children = recording_rastrigin.values[:4]
	second = builder.run(1, 2, selection, Rastrigin(), SearchContext.seeded(2024))

	assert torch.equal(first.vector, second.vector)
	assert first.fitness == second.fitness
	assert first.evaluations == 4
	assert len(children) == 4
	assert all(first.fitness <= value for value in children)


def test_run_resets_counters_between_runs():
	builder = RecursiveSolutionBuilder(SearchConfig(input_size=5))
	context = SearchContext.seeded(9)
	first = builder.run(2, 3, ExhaustivePairwise(), Rastrigin(), context)
	second = builder.run(2, 3, ExhaustivePairwise(), Rastrigin(), context)

	assert first.evaluations == second.evaluations == 4 * 9
	assert first.solution_calls == second.solution_calls == 13
	assert first.leaf_solutions == second.leaf_solutions == 9
	assert first.selection_rounds == second.selection_rounds == 4


def test_run_reports_names_and_final_fitness():
	builder = RecursiveSolutionBuilder(SearchConfig(input_size=6))
	result = builder.run(2, 2, IterativeLocalSearch(), Rastrigin(), SearchContext.seeded(12))

	assert result.selection_name == "Local Search"
	assert result.function_name == "Rastrigin"
	assert result.depth == 2 and result.size == 2
	assert result.fitness == Rastrigin().calculate(result.vector)
	assert "Local Search" in repr(result)


def test_independent_contexts_do_not_interfere():
	builder = RecursiveSolutionBuilder(SearchConfig(input_size=8))
	a = SearchContext.seeded(77)
	b = SearchContext.seeded(77)
	other = SearchContext.seeded(1)

	first = builder.solution(2, 2, ExhaustivePairwise(), Rastrigin(), a)
	builder.solution(3, 2, ExhaustivePairwise(), Rastrigin(), other)
	second = builder.solution(2, 2, ExhaustivePairwise(), Rastrigin(), b)

	assert torch.equal(first, second)
	assert a.evaluations == b.evaluations


def test_verbose_builder_logs_result():
	lines = []
	builder = RecursiveSolutionBuilder(SearchConfig(input_size=4), verbose=True, logger=lines.append)
	builder.run(1, 2, ExhaustivePairwise(), Rastrigin(), SearchContext.seeded(0))
	assert len(lines) == 1
	assert lines[0].startswith("[Builder] SolutionResult(")
