"""
Search Configuration Dataclasses

Typed run constants for the recursive population search and the
benchmark sweep. Validation happens at construction time so a bad value
fails before any vector is generated.
"""

from dataclasses import dataclass
from typing import Optional


# Size of the input vector (search space dimensions).
INPUT_SIZE = 100

# Per-component mutation probability.
MUTATION_RATE = 0.01


@dataclass(frozen=True)
class SearchConfig:
	"""
	Configuration for one recursive search run.

	Attributes:
		input_size: Length of every vector in the run
		mutation_rate: Probability that a child component is perturbed
		max_rounds: Diagnostic cap on local-search rounds (None = unbounded).
			Not part of the search semantics; meant for test harnesses.
	"""
	input_size: int = INPUT_SIZE
	mutation_rate: float = MUTATION_RATE
	max_rounds: Optional[int] = None

	def __post_init__(self):
		if self.input_size < 1:
			raise ValueError(f"input_size must be >= 1, got {self.input_size}")
		if not 0.0 <= self.mutation_rate <= 1.0:
			raise ValueError(f"mutation_rate must be in [0, 1], got {self.mutation_rate}")
		if self.max_rounds is not None and self.max_rounds < 1:
			raise ValueError(f"max_rounds must be >= 1 or None, got {self.max_rounds}")


@dataclass(frozen=True)
class SweepConfig:
	"""
	Depth x population size grid for a benchmark sweep.

	Defaults are the standard benchmark grid:
	- depth: 2..8 generations of recursion
	- size: 2..11 individuals per population
	"""
	min_depth: int = 2
	max_depth: int = 8
	min_size: int = 2
	max_size: int = 11
	seed: Optional[int] = None

	def __post_init__(self):
		if self.min_depth < 0:
			raise ValueError(f"min_depth must be >= 0, got {self.min_depth}")
		if self.max_depth < self.min_depth:
			raise ValueError(f"max_depth ({self.max_depth}) < min_depth ({self.min_depth})")
		if self.min_size < 1:
			raise ValueError(f"min_size must be >= 1, got {self.min_size}")
		if self.max_size < self.min_size:
			raise ValueError(f"max_size ({self.max_size}) < min_size ({self.min_size})")

	@property
	def depths(self) -> range:
		return range(self.min_depth, self.max_depth + 1)

	@property
	def sizes(self) -> range:
		return range(self.min_size, self.max_size + 1)
