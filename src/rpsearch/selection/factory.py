"""
Factory for creating selection strategies.
"""

from typing import Callable, Optional

from rpsearch.config import SearchConfig
from rpsearch.enums import SelectionMethod
from rpsearch.selection.base import SelectionStrategyBase
from rpsearch.selection.exhaustive import ExhaustivePairwise
from rpsearch.selection.local_search import IterativeLocalSearch


class SelectionStrategyFactory:
	"""
	Factory for creating selection strategies.

	Usage:
		strategy = SelectionStrategyFactory.create(SelectionMethod.EXHAUSTIVE_PAIRWISE)

		# With a custom mutation rate and a diagnostic round cap
		strategy = SelectionStrategyFactory.create(
			SelectionMethod.ITERATIVE_LOCAL_SEARCH,
			config=SearchConfig(mutation_rate=0.05, max_rounds=50),
			verbose=True,
		)
	"""

	@staticmethod
	def create(
		method: SelectionMethod,
		config: Optional[SearchConfig] = None,
		verbose: bool = False,
		logger: Optional[Callable[[str], None]] = None,
	) -> SelectionStrategyBase:
		"""
		Create a selection strategy.

		Args:
			method: Which selection policy to use
			config: Shared run configuration (optional)
			verbose: Log per-call progress
			logger: Logging callable (default: print)

		Returns:
			SelectionStrategyBase subclass instance
		"""
		match method:
			case SelectionMethod.EXHAUSTIVE_PAIRWISE:
				return ExhaustivePairwise(config=config, verbose=verbose, logger=logger)
			case SelectionMethod.ITERATIVE_LOCAL_SEARCH:
				return IterativeLocalSearch(config=config, verbose=verbose, logger=logger)
			case _:
				raise ValueError(f"Unknown selection method: {method}")

	@staticmethod
	def create_all(
		config: Optional[SearchConfig] = None,
		verbose: bool = False,
		logger: Optional[Callable[[str], None]] = None,
	) -> list[SelectionStrategyBase]:
		"""One instance of every selection policy, in enum order."""
		return [
			SelectionStrategyFactory.create(method, config=config, verbose=verbose, logger=logger)
			for method in SelectionMethod
		]
