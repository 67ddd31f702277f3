"""
Exhaustive pairwise selection ("brute force").

Every member of the population is crossed with every member (itself
included) exactly once, giving |population|^2 scored children.
"""

from torch import Tensor

from rpsearch.context import SearchContext
from rpsearch.functions import ObjectiveFunction
from rpsearch.selection.base import SelectionStrategyBase


class ExhaustivePairwise(SelectionStrategyBase):
	"""
	Brute-force selection between each other.

	Single pass over population x population in row-major order; the best
	child of the pass is returned.
	"""

	@property
	def name(self) -> str:
		return "Brute Force"

	def best(
		self,
		population: list[Tensor],
		function: ObjectiveFunction,
		context: SearchContext,
	) -> Tensor:
		result, optimum = self._pairwise_pass(
			population, function, context, self._empty_result()
		)
		self._log(f"[BF] {len(population)}^2 children, best={optimum:.4f}")
		return result
