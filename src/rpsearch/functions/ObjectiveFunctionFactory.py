from rpsearch.enums import ObjectiveFunctionType
from rpsearch.functions.ObjectiveFunction import ObjectiveFunction
from rpsearch.functions.Ackley import Ackley
from rpsearch.functions.Griewank import Griewank
from rpsearch.functions.Michalewicz import Michalewicz
from rpsearch.functions.Norwegian import Norwegian
from rpsearch.functions.Rastrigin import Rastrigin
from rpsearch.functions.Schwefel import Schwefel


class ObjectiveFunctionFactory:

	@staticmethod
	def create(kind: ObjectiveFunctionType) -> ObjectiveFunction:
		match kind:
			case ObjectiveFunctionType.ACKLEY:
				return Ackley()
			case ObjectiveFunctionType.GRIEWANK:
				return Griewank()
			case ObjectiveFunctionType.RASTRIGIN:
				return Rastrigin()
			case ObjectiveFunctionType.SCHWEFEL:
				return Schwefel()
			case ObjectiveFunctionType.MICHALEWICZ:
				return Michalewicz()
			case ObjectiveFunctionType.NORWEGIAN:
				return Norwegian()
			case _:
				raise ValueError(f"Unsupported ObjectiveFunctionType: {kind}")

	@staticmethod
	def create_all() -> list[ObjectiveFunction]:
		"""One instance of every built-in landscape, in enum order."""
		return [ObjectiveFunctionFactory.create(kind) for kind in ObjectiveFunctionType]
