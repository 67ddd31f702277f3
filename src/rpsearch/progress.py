"""
Progress tracking for iterative selection rounds.

Records the fitness values scored in each round of a selection strategy
and logs a standardized one-line summary per round.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional


@dataclass
class RoundStats:
	"""Statistics for a single selection round."""
	round: int
	best_global: float
	best_current: float
	avg_current: float
	worst_current: float
	evaluations: int
	improved: bool = False


class RoundTracker:
	"""
	Tracks selection rounds and logs standardized metrics.

	Lower fitness is always better.

	Usage:
		tracker = RoundTracker(logger=my_logger, prefix="[LS]")

		for round_idx in range(rounds):
			values = [function.calculate(child) for child in children]
			tracker.tick(values)

		summary = tracker.summary()

	The tracker will log lines like:
		[LS] [Round 3] best=12.4931, current=12.7710, avg=41.0025 *
	"""

	def __init__(
		self,
		logger: Optional[Callable[[str], None]] = None,
		prefix: str = "",
	):
		"""
		Args:
			logger: Callable that logs messages (e.g., Logger instance, print)
			prefix: Prefix for log messages (e.g., "[LS]")
		"""
		self._log = logger or print
		self._prefix = prefix + " " if prefix else ""

		self._best_global: Optional[float] = None
		self._best_round: int = 0
		self._history: List[RoundStats] = []

	def tick(self, fitness_values: List[float], log: bool = True) -> RoundStats:
		"""
		Record the fitness values scored during one round.

		Args:
			fitness_values: Every fitness evaluated in the round
			log: Whether to log progress

		Returns:
			RoundStats for this round
		"""
		if not fitness_values:
			raise ValueError("fitness_values cannot be empty")

		round_idx = len(self._history)
		best_current = min(fitness_values)

		improved = False
		if self._best_global is None or best_current < self._best_global:
			self._best_global = best_current
			self._best_round = round_idx
			improved = True

		stats = RoundStats(
			round=round_idx,
			best_global=self._best_global,
			best_current=best_current,
			avg_current=sum(fitness_values) / len(fitness_values),
			worst_current=max(fitness_values),
			evaluations=len(fitness_values),
			improved=improved,
		)
		self._history.append(stats)

		if log:
			improved_str = " *" if improved else ""
			self._log(
				f"{self._prefix}[Round {round_idx + 1}] "
				f"best={stats.best_global:.4f}, "
				f"current={stats.best_current:.4f}, "
				f"avg={stats.avg_current:.4f}{improved_str}"
			)

		return stats

	@property
	def best_global(self) -> Optional[float]:
		"""Best fitness value seen so far."""
		return self._best_global

	@property
	def history(self) -> List[RoundStats]:
		"""Full history of round stats."""
		return self._history.copy()

	@property
	def rounds_run(self) -> int:
		return len(self._history)

	def summary(self) -> dict:
		"""Get summary statistics."""
		if not self._history:
			return {"rounds": 0}

		return {
			"rounds": len(self._history),
			"initial_fitness": self._history[0].best_current,
			"final_fitness": self._best_global,
			"best_round": self._best_round,
			"improvements": sum(1 for s in self._history if s.improved),
			"evaluations": sum(s.evaluations for s in self._history),
		}
