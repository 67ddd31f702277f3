from math import sin
from math import sqrt

from rpsearch.functions.ObjectiveFunction import ObjectiveFunction


class Schwefel(ObjectiveFunction):
	"""
	Schwefel function.

	https://www.sfu.ca/~ssurjano/schwef.html
	"""

	def _calculate(self, x: list[float]) -> float:
		total = 0.0
		for xi in x:
			total += xi * sin(sqrt(abs(xi)))

		return 418.9829 * len(x) - total

	def minimum(self) -> float:
		return -500.0

	def maximum(self) -> float:
		return 500.0

	def title(self) -> str:
		return "Schwefel"
