"""
Base class for selection strategies.

A selection strategy reduces a population to the single best vector it
can produce by pairing members through crossover and mutation.
"""

from abc import ABC, abstractmethod
from math import inf
from typing import Callable, Optional

from torch import Tensor
from torch import empty
from torch import float64

from rpsearch.config import SearchConfig
from rpsearch.context import SearchContext
from rpsearch.functions import ObjectiveFunction
from rpsearch.operators import crossover, mutate


class SelectionStrategyBase(ABC):
	"""
	Abstract base class for selection strategies.

	Subclasses must implement:
	- best(): reduce a population to one vector
	- name property

	Every child a strategy scores is counted once in
	`context.evaluations`. The vector returned is the lowest-fitness child
	generated during the call; on ties the first one found is kept.

	Usage:
		strategy = ExhaustivePairwise()
		winner = strategy.best(population, Rastrigin(), SearchContext.seeded(7))
	"""

	def __init__(
		self,
		config: Optional[SearchConfig] = None,
		verbose: bool = False,
		logger: Optional[Callable[[str], None]] = None,
	):
		self._config = config or SearchConfig()
		self._verbose = verbose
		self._logger = logger or print

	def _log(self, msg: str) -> None:
		"""Log a message using the configured logger."""
		if self._verbose:
			self._logger(msg)

	@property
	def config(self) -> SearchConfig:
		return self._config

	@property
	def verbose(self) -> bool:
		return self._verbose

	@property
	@abstractmethod
	def name(self) -> str:
		"""Return the strategy name."""
		...

	def title(self) -> str:
		"""Display name of the strategy."""
		return self.name

	@abstractmethod
	def best(
		self,
		population: list[Tensor],
		function: ObjectiveFunction,
		context: SearchContext,
	) -> Tensor:
		"""
		Select the best vector obtainable from a population.

		Args:
			population: Vectors of equal length
			function: Objective function to minimize
			context: Random generator and evaluation counter

		Returns:
			Best child generated, or an empty tensor for an empty population
		"""
		...

	@staticmethod
	def _empty_result() -> Tensor:
		return empty(0, dtype=float64)

	def _pairwise_pass(
		self,
		population: list[Tensor],
		function: ObjectiveFunction,
		context: SearchContext,
		result: Tensor,
		optimum: float = inf,
		fitness_values: Optional[list[float]] = None,
	) -> tuple[Tensor, float]:
		"""
		Crossover and mutation of every ordered pair, self-pairs included.

		Counts one round in `context.selection_rounds`.

		Args:
			result: Best vector carried into the pass
			optimum: Fitness of `result` (inf when nothing was scored yet)
			fitness_values: If given, every scored fitness is appended to it

		Returns:
			(best vector, its fitness) after the pass
		"""
		context.selection_rounds += 1
		for first in population:
			for second in population:
				child = crossover(first, second, context)
				mutate(child, context, self._config.mutation_rate)

				value = function.calculate(child)
				context.record_evaluation()
				if fitness_values is not None:
					fitness_values.append(value)

				if value < optimum:
					result = child
					optimum = value

		return result, optimum

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}(config={self._config}, verbose={self._verbose})"
