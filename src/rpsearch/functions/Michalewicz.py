from math import pi
from math import pow
from math import sin

from rpsearch.functions.ObjectiveFunction import ObjectiveFunction


class Michalewicz(ObjectiveFunction):
	"""
	Michalewicz function.

	https://www.sfu.ca/~ssurjano/michal.html

	The steepness parameter m defaults to 10; larger values make the
	valleys narrower.
	"""

	def __init__(self, m: float = 10.0) -> None:
		super().__init__()
		self.m = m

	def _calculate(self, x: list[float]) -> float:
		total = 0.0
		i = 1.0
		for xi in x:
			total += sin(xi) * pow(sin(i * xi * xi / pi), 2 * self.m)
			i += 1.0

		return -total

	def minimum(self) -> float:
		return 0.0

	def maximum(self) -> float:
		return pi

	def title(self) -> str:
		return "Michalewicz"
