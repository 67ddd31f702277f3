from math import cos
from math import exp
from math import pi
from math import sqrt

from rpsearch.functions.ObjectiveFunction import ObjectiveFunction


class Ackley(ObjectiveFunction):
	"""
	Ackley function.

	https://www.sfu.ca/~ssurjano/ackley.html
	"""

	def __init__(self, a: float = 20.0, b: float = 0.2, c: float = 2 * pi) -> None:
		super().__init__()
		self.a = a
		self.b = b
		self.c = c

	def _calculate(self, x: list[float]) -> float:
		sum1 = 0.0
		sum2 = 0.0
		for xi in x:
			sum1 += xi * xi
			sum2 += cos(self.c * xi)

		n = len(x)
		return -self.a * exp(-self.b * sqrt(sum1 / n)) - exp(sum2 / n) + self.a + exp(1.0)

	def minimum(self) -> float:
		return -32.768

	def maximum(self) -> float:
		return 32.768

	def title(self) -> str:
		return "Ackley"
