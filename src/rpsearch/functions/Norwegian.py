from math import cos
from math import pi

from rpsearch.functions.ObjectiveFunction import ObjectiveFunction


class Norwegian(ObjectiveFunction):
	"""
	Norwegian function.

	http://ssudl.solent.ac.uk/3366/1/Seminar_BAN_30_03_2016.ppt
	"""

	def _calculate(self, x: list[float]) -> float:
		mul = 1.0
		for xi in x:
			mul *= cos(pi * xi * xi * xi) * (99.0 + xi) / 100.0

		return -mul

	def minimum(self) -> float:
		return -1.1

	def maximum(self) -> float:
		return 1.1

	def title(self) -> str:
		return "Norwegian"
