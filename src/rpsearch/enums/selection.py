"""Enums for selection strategies."""

from enum import IntEnum, auto


class SelectionMethod(IntEnum):
	"""
	Policy that reduces a population to one representative vector.
	"""
	EXHAUSTIVE_PAIRWISE = auto()     # One pass over population x population
	ITERATIVE_LOCAL_SEARCH = auto()  # Repeat passes until a round stops improving
