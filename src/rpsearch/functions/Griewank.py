from math import cos
from math import sqrt

from rpsearch.functions.ObjectiveFunction import ObjectiveFunction


class Griewank(ObjectiveFunction):
	"""
	Griewank function.

	https://en.wikipedia.org/wiki/Griewank_function
	"""

	def _calculate(self, x: list[float]) -> float:
		total = 0.0
		for xi in x:
			total += xi * xi

		multiplication = 1.0
		for i, xi in enumerate(x, start=1):
			multiplication *= cos(xi / sqrt(i))

		return 1.0 + total / 4000.0 - multiplication

	def minimum(self) -> float:
		return -600.0

	def maximum(self) -> float:
		return 600.0

	def title(self) -> str:
		return "Griewank"
