"""
Variation operators: uniform crossover and uniform-noise mutation.

Both draw exclusively from the generator of the SearchContext they are
given, so a seeded context reproduces every child exactly.
"""

from torch import Tensor
from torch import float64
from torch import rand
from torch import where

from rpsearch.config import MUTATION_RATE
from rpsearch.context import SearchContext


def crossover(first: Tensor, second: Tensor, context: SearchContext) -> Tensor:
	"""
	Uniform crossover.

	Each component of the child is copied from `first` or `second` on a
	fair coin flip. Components are never blended.

	Args:
		first: First parent
		second: Second parent (same length as first)
		context: Search context providing the random generator

	Returns:
		New child vector

	Raises:
		ValueError: If the parents differ in length
	"""
	if first.shape != second.shape:
		raise ValueError(
			f"Parents must have equal length, got {tuple(first.shape)} and {tuple(second.shape)}"
		)

	coins = rand(first.shape, generator=context.generator, dtype=float64)
	return where(coins < 0.5, first, second)


def mutate(vector: Tensor, context: SearchContext, rate: float = MUTATION_RATE) -> Tensor:
	"""
	Mutation of a child, in place.

	With probability `rate` each component gets U(-0.5, 0.5) added to it.
	No clamping is applied, so components may leave the function domain.

	Args:
		vector: Child to mutate (modified in place)
		context: Search context providing the random generator
		rate: Per-component mutation probability in [0, 1]

	Returns:
		The same tensor, for chaining
	"""
	if not 0.0 <= rate <= 1.0:
		raise ValueError(f"mutation rate must be in [0, 1], got {rate}")

	hits = rand(vector.shape, generator=context.generator, dtype=float64) < rate
	noise = rand(vector.shape, generator=context.generator, dtype=float64) - 0.5
	vector[hits] += noise[hits]
	return vector
