from math import cos
from math import pi

from rpsearch.functions.ObjectiveFunction import ObjectiveFunction


class Rastrigin(ObjectiveFunction):
	"""
	Rastrigin function.

	https://en.wikipedia.org/wiki/Rastrigin_function
	"""

	A = 10.0

	def _calculate(self, x: list[float]) -> float:
		total = 0.0
		for xi in x:
			total += xi * xi - self.A * cos(2.0 * pi * xi)

		return self.A * len(x) + total

	def minimum(self) -> float:
		return -5.12

	def maximum(self) -> float:
		return 5.12

	def title(self) -> str:
		return "Rastrigin"
