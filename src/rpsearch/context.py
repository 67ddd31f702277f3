"""
Explicit random source and counters for one search run.

Every builder call, strategy and variation operator draws from the
generator held here and bumps the counters held here, so independent runs
never share state.
"""

from dataclasses import dataclass, field
from typing import Optional

from torch import Generator


@dataclass
class SearchContext:
	"""
	Random generator plus evaluation bookkeeping for a run.

	Attributes:
		generator: Seeded torch generator used for every random draw
		evaluations: Children produced and scored by selection strategies
		solution_calls: Invocations of the recursive builder (all depths)
		leaf_solutions: Depth-0 invocations (random vectors sampled)
		selection_rounds: Pairwise passes run by selection strategies
	"""
	generator: Generator = field(default_factory=Generator)
	evaluations: int = 0
	solution_calls: int = 0
	leaf_solutions: int = 0
	selection_rounds: int = 0

	@classmethod
	def seeded(cls, seed: Optional[int] = None) -> "SearchContext":
		"""
		Create a context whose generator is seeded for reproducibility.

		Args:
			seed: Seed value (None = non-deterministic seed)
		"""
		generator = Generator()
		if seed is None:
			generator.seed()
		else:
			generator.manual_seed(seed)
		return cls(generator=generator)

	def reset(self) -> None:
		"""Zero the counters. The generator state is left untouched."""
		self.evaluations = 0
		self.solution_calls = 0
		self.leaf_solutions = 0
		self.selection_rounds = 0

	def record_evaluation(self) -> None:
		self.evaluations += 1

	def __repr__(self) -> str:
		return (
			f"SearchContext(evaluations={self.evaluations}, "
			f"solution_calls={self.solution_calls}, "
			f"leaf_solutions={self.leaf_solutions}, "
			f"selection_rounds={self.selection_rounds})"
		)
