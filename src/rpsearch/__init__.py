"""rpsearch - Recursive population search over benchmark functions."""

from rpsearch.logger import Logger, create_logger
from rpsearch.progress import RoundTracker, RoundStats
from rpsearch.config import SearchConfig, SweepConfig, INPUT_SIZE, MUTATION_RATE
from rpsearch.context import SearchContext
from rpsearch.enums import ObjectiveFunctionType, SelectionMethod
from rpsearch.functions import (
	ObjectiveFunction,
	ObjectiveFunctionFactory,
	Ackley,
	Griewank,
	Michalewicz,
	Norwegian,
	Rastrigin,
	Schwefel,
)
from rpsearch.operators import crossover, mutate
from rpsearch.selection import (
	SelectionStrategyBase,
	SelectionStrategyFactory,
	ExhaustivePairwise,
	IterativeLocalSearch,
)
from rpsearch.builder import RecursiveSolutionBuilder, SolutionResult
from rpsearch.benchmark import BenchmarkSweep, BenchmarkRecord

__all__ = [
	'Logger', 'create_logger',
	'RoundTracker', 'RoundStats',
	'SearchConfig', 'SweepConfig', 'INPUT_SIZE', 'MUTATION_RATE',
	'SearchContext',
	'ObjectiveFunctionType', 'SelectionMethod',
	'ObjectiveFunction', 'ObjectiveFunctionFactory',
	'Ackley', 'Griewank', 'Michalewicz', 'Norwegian', 'Rastrigin', 'Schwefel',
	'crossover', 'mutate',
	'SelectionStrategyBase', 'SelectionStrategyFactory',
	'ExhaustivePairwise', 'IterativeLocalSearch',
	'RecursiveSolutionBuilder', 'SolutionResult',
	'BenchmarkSweep', 'BenchmarkRecord',
]
