"""
Iterative local search selection.

Repeats the exhaustive pairwise pass until a whole round fails to improve
on the best fitness carried over from earlier rounds. Each round resamples
crossover coins and mutations, which is what eventually stalls the search.
There is no built-in round limit; SearchConfig.max_rounds exists only as a
diagnostic guard for test harnesses.
"""

from math import inf

from torch import Tensor

from rpsearch.context import SearchContext
from rpsearch.functions import ObjectiveFunction
from rpsearch.progress import RoundTracker
from rpsearch.selection.base import SelectionStrategyBase


class IterativeLocalSearch(SelectionStrategyBase):
	"""
	Iterate-to-fixpoint selection.

	The first round consumes the random stream exactly like one
	ExhaustivePairwise pass, so from the same generator state the result is
	never worse than the brute-force one. Rounds are counted on the
	SearchContext; the strategy itself keeps no per-call state.
	"""

	@property
	def name(self) -> str:
		return "Local Search"

	def best(
		self,
		population: list[Tensor],
		function: ObjectiveFunction,
		context: SearchContext,
	) -> Tensor:
		max_rounds = self._config.max_rounds
		tracker = RoundTracker(logger=self._logger, prefix="[LS]") if self._verbose else None

		result = self._empty_result()
		optimum = inf
		rounds = 0
		while True:
			rounds += 1
			values = [] if tracker is not None else None

			result, round_optimum = self._pairwise_pass(
				population, function, context, result, optimum, values
			)
			if values:
				tracker.tick(values)

			improved = round_optimum < optimum
			optimum = round_optimum
			if not improved:
				break

			if max_rounds is not None and rounds >= max_rounds:
				self._log(f"[LS] Round cap {max_rounds} reached while still improving, best={optimum:.4f}")
				break

		self._log(f"[LS] Stopped after {rounds} rounds, best={optimum:.4f}")
		return result
