from abc import ABC, abstractmethod

from torch import as_tensor
from torch import float64


class ObjectiveFunction(ABC):
	"""
	Benchmark function: fitness of a vector plus the box it is sampled from.

	Subclasses implement `_calculate` over the components as Python floats,
	accumulating in index order so results are identical to the reference
	left-to-right loops. Lower fitness is better. Inputs are never clamped,
	so implementations must accept components outside [minimum(), maximum()].
	"""

	def __init__(self) -> None:
		super().__init__()

	@abstractmethod
	def _calculate(self, x: list[float]) -> float:
		"""
		Calculate the fitness of the vector components.
		"""
		pass

	def calculate(self, vector) -> float:
		"""
		Calculate the fitness of a vector (tensor or sequence of reals).
		"""
		return float(self._calculate(as_tensor(vector, dtype=float64).tolist()))

	@abstractmethod
	def minimum(self) -> float:
		"""
		Minimal solution space value.
		"""
		pass

	@abstractmethod
	def maximum(self) -> float:
		"""
		Maximal solution space value.
		"""
		pass

	@abstractmethod
	def title(self) -> str:
		"""
		Function name.
		"""
		pass

	def __call__(self, vector) -> float:
		return self.calculate(vector)

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}(domain=[{self.minimum()}, {self.maximum()}])"
