"""
Benchmark sweep over recursion depth and population size.

Runs the recursive builder for every (function, selection, depth, size)
combination of a grid, timing each call and collecting the evaluation
count and resulting fitness. Results come back as records; `matrix`
pivots them into depth x size tables for reporting.
"""

import time
from dataclasses import dataclass
from typing import Optional, Sequence

from torch import Tensor

from rpsearch.builder import RecursiveSolutionBuilder
from rpsearch.config import SearchConfig, SweepConfig
from rpsearch.context import SearchContext
from rpsearch.functions import ObjectiveFunction, ObjectiveFunctionFactory
from rpsearch.logger import Logger, create_logger
from rpsearch.selection import SelectionStrategyBase, SelectionStrategyFactory


MATRIX_FIELDS = ("elapsed_ms", "evaluations", "fitness")


@dataclass
class BenchmarkRecord:
	"""One timed run of the sweep."""
	function_name: str
	selection_name: str
	depth: int
	size: int
	evaluations: int
	fitness: float
	elapsed_ms: float
	vector: Tensor


class BenchmarkSweep:
	"""
	Sweeps depth and population size for each function and strategy.

	Usage:
		sweep = BenchmarkSweep(
			SweepConfig(min_depth=1, max_depth=3, min_size=2, max_size=4, seed=7),
			logger=create_logger("sweep", console=False),
		)
		records = sweep.run()
		fitness = sweep.matrix(records, "fitness", "Rastrigin", "Brute Force")
		# fitness[depth][size] -> float
	"""

	def __init__(
		self,
		config: Optional[SweepConfig] = None,
		search_config: Optional[SearchConfig] = None,
		logger: Optional[Logger] = None,
	):
		self._config = config or SweepConfig()
		self._search_config = search_config or SearchConfig()
		self._log = logger or create_logger("sweep")
		self._builder = RecursiveSolutionBuilder(self._search_config)

	@property
	def config(self) -> SweepConfig:
		return self._config

	@property
	def logger(self) -> Logger:
		return self._log

	def run(
		self,
		functions: Optional[Sequence[ObjectiveFunction]] = None,
		selections: Optional[Sequence[SelectionStrategyBase]] = None,
	) -> list[BenchmarkRecord]:
		"""
		Run the full grid.

		Args:
			functions: Objective functions to sweep (default: all built-ins)
			selections: Selection strategies to sweep (default: all built-ins)

		Returns:
			One BenchmarkRecord per (function, selection, depth, size)
		"""
		functions = list(functions) if functions is not None else ObjectiveFunctionFactory.create_all()
		selections = list(selections) if selections is not None else SelectionStrategyFactory.create_all(
			config=self._search_config
		)

		context = SearchContext.seeded(self._config.seed)
		records = []
		for function in functions:
			self._log.header(function.title())
			for selection in selections:
				self._log.section(selection.title())
				for depth in self._config.depths:
					for size in self._config.sizes:
						records.append(self.run_one(depth, size, selection, function, context))
		return records

	def run_one(
		self,
		depth: int,
		size: int,
		selection: SelectionStrategyBase,
		function: ObjectiveFunction,
		context: SearchContext,
	) -> BenchmarkRecord:
		"""Time a single builder run and log its report block."""
		start = time.perf_counter()
		result = self._builder.run(depth, size, selection, function, context)
		elapsed_ms = (time.perf_counter() - start) * 1000.0

		record = BenchmarkRecord(
			function_name=result.function_name,
			selection_name=result.selection_name,
			depth=depth,
			size=size,
			evaluations=result.evaluations,
			fitness=result.fitness,
			elapsed_ms=elapsed_ms,
			vector=result.vector,
		)
		self._report(record)
		return record

	def _report(self, record: BenchmarkRecord) -> None:
		self._log(f"Function Name:\t{record.function_name}")
		self._log(f"Selection:\t{record.selection_name}")
		self._log(f"Recursion Depth:\t{record.depth}")
		self._log(f"Population Size:\t{record.size}")
		self._log(f"Evaluated Individuals:\t{record.evaluations}")
		self._log("Input Vector:\t" + "\t".join(str(value) for value in record.vector.tolist()))
		self._log(f"Output Value:\t{record.fitness}")
		self._log(f"Time [ms]:\t{record.elapsed_ms:.3f}")
		self._log("")

	@staticmethod
	def matrix(
		records: Sequence[BenchmarkRecord],
		field: str,
		function_name: str,
		selection_name: str,
	) -> dict[int, dict[int, float]]:
		"""
		Pivot records of one function/strategy pair into a depth x size table.

		Args:
			records: Output of run()
			field: One of "elapsed_ms", "evaluations", "fitness"
			function_name: Function title to select
			selection_name: Strategy title to select

		Returns:
			{depth: {size: value}}
		"""
		if field not in MATRIX_FIELDS:
			raise ValueError(f"Unsupported matrix field: {field} (expected one of {MATRIX_FIELDS})")

		table: dict[int, dict[int, float]] = {}
		for record in records:
			if record.function_name != function_name or record.selection_name != selection_name:
				continue
			table.setdefault(record.depth, {})[record.size] = getattr(record, field)
		return table
