"""Enums for benchmark objective functions."""

from enum import IntEnum, auto


class ObjectiveFunctionType(IntEnum):
	"""
	Built-in benchmark landscapes.

	All are minimization problems over a box domain shared by every
	component of the input vector.
	"""
	ACKLEY = auto()       # Nearly flat outer region, deep hole at the origin
	GRIEWANK = auto()     # Many regularly spaced shallow local minima
	RASTRIGIN = auto()    # Highly multimodal, regular grid of minima
	SCHWEFEL = auto()     # Deceptive: global minimum far from the next best
	MICHALEWICZ = auto()  # Steep valleys and ridges, m controls steepness
	NORWEGIAN = auto()    # Product landscape with cubic cosine ripples
