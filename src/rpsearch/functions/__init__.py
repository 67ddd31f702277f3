"""
Benchmark objective functions for continuous minimization.

Every function maps a real vector of any length to a scalar fitness and
declares the box [minimum, maximum] that depth-0 vectors are sampled from.
New landscapes only need to subclass ObjectiveFunction.
"""

from rpsearch.enums import ObjectiveFunctionType

from .ObjectiveFunction import ObjectiveFunction
from .Ackley import Ackley
from .Griewank import Griewank
from .Michalewicz import Michalewicz
from .Norwegian import Norwegian
from .Rastrigin import Rastrigin
from .Schwefel import Schwefel
from .ObjectiveFunctionFactory import ObjectiveFunctionFactory


__all__ = [
	# Enum
	"ObjectiveFunctionType",
	# Base class
	"ObjectiveFunction",
	# Implementations
	"Ackley",
	"Griewank",
	"Michalewicz",
	"Norwegian",
	"Rastrigin",
	"Schwefel",
	# Factory
	"ObjectiveFunctionFactory",
]
