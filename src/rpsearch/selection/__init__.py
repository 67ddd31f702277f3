"""
Selection Strategies.

Reduce a population to one representative vector by pairing members
through crossover and mutation and keeping the best child.

Usage:
	from rpsearch.enums import SelectionMethod
	from rpsearch.selection import SelectionStrategyFactory

	strategy = SelectionStrategyFactory.create(SelectionMethod.EXHAUSTIVE_PAIRWISE)
	winner = strategy.best(population, function, context)
"""

from rpsearch.selection.base import SelectionStrategyBase
from rpsearch.selection.exhaustive import ExhaustivePairwise
from rpsearch.selection.local_search import IterativeLocalSearch
from rpsearch.selection.factory import SelectionStrategyFactory


__all__ = [
	# Base
	'SelectionStrategyBase',
	# Strategies
	'ExhaustivePairwise',
	'IterativeLocalSearch',
	# Factory
	'SelectionStrategyFactory',
]
