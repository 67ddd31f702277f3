"""
Recursive solution builder.

A solution at depth d is the vector a selection strategy picks from a
population of `size` independent solutions at depth d-1. Depth 0 is a
uniformly random vector inside the objective function's box. Nothing is
cached: every sub-solution is rebuilt from fresh randomness, so the number
of random leaves grows as size^depth.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from torch import Tensor
from torch import float64
from torch import rand

from rpsearch.config import SearchConfig
from rpsearch.context import SearchContext
from rpsearch.functions import ObjectiveFunction
from rpsearch.selection import SelectionStrategyBase


@dataclass
class SolutionResult:
	"""Result of one recursive search run."""

	vector: Tensor
	fitness: float
	evaluations: int
	solution_calls: int
	leaf_solutions: int
	selection_rounds: int
	depth: int
	size: int
	selection_name: str
	function_name: str

	def __repr__(self) -> str:
		return (
			f"SolutionResult("
			f"function={self.function_name}, "
			f"selection={self.selection_name}, "
			f"depth={self.depth}, size={self.size}, "
			f"evaluations={self.evaluations}, "
			f"fitness={self.fitness:.4f})"
		)


class RecursiveSolutionBuilder:
	"""
	Builds the recursive population hierarchy and returns its top survivor.

	Usage:
		builder = RecursiveSolutionBuilder(SearchConfig(input_size=30))
		result = builder.run(
			depth=3,
			size=4,
			selection=ExhaustivePairwise(),
			function=Rastrigin(),
			context=SearchContext.seeded(42),
		)
		print(result.fitness, result.evaluations)
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
		if self._verbose:
			self._logger(msg)

	@property
	def config(self) -> SearchConfig:
		return self._config

	def random_vector(self, function: ObjectiveFunction, context: SearchContext) -> Tensor:
		"""First generation is selected randomly inside the function domain."""
		low, high = function.minimum(), function.maximum()
		uniform = rand(self._config.input_size, generator=context.generator, dtype=float64)
		return low + uniform * (high - low)

	def solution(
		self,
		depth: int,
		size: int,
		selection: SelectionStrategyBase,
		function: ObjectiveFunction,
		context: SearchContext,
	) -> Tensor:
		"""
		Generate solution of particular population size and recursion depth.

		Args:
			depth: Recursion depth (>= 0). Depth 0 ignores `selection`.
			size: Population size at every level (>= 1)
			selection: Strategy reducing each population to one vector
			function: Objective function to minimize
			context: Random generator and counters

		Returns:
			Best found vector of length config.input_size

		Raises:
			ValueError: If depth < 0 or size < 1
		"""
		if depth < 0:
			raise ValueError(f"depth must be >= 0, got {depth}")
		if size < 1:
			raise ValueError(f"size must be >= 1, got {size}")

		context.solution_calls += 1

		if depth == 0:
			context.leaf_solutions += 1
			return self.random_vector(function, context)

		population = [
			self.solution(depth - 1, size, selection, function, context)
			for _ in range(size)
		]
		return selection.best(population, function, context)

	def run(
		self,
		depth: int,
		size: int,
		selection: SelectionStrategyBase,
		function: ObjectiveFunction,
		context: Optional[SearchContext] = None,
	) -> SolutionResult:
		"""
		Reset the context counters, build one solution and score it.

		The final scoring of the returned vector is not counted as an
		evaluation.
		"""
		context = context or SearchContext.seeded()
		context.reset()

		vector = self.solution(depth, size, selection, function, context)
		fitness = function.calculate(vector)

		result = SolutionResult(
			vector=vector,
			fitness=fitness,
			evaluations=context.evaluations,
			solution_calls=context.solution_calls,
			leaf_solutions=context.leaf_solutions,
			selection_rounds=context.selection_rounds,
			depth=depth,
			size=size,
			selection_name=selection.title(),
			function_name=function.title(),
		)
		self._log(f"[Builder] {result}")
		return result

	def __repr__(self) -> str:
		return f"RecursiveSolutionBuilder(config={self._config}, verbose={self._verbose})"
