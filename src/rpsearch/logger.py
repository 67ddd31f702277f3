"""
Run logger for benchmark sweeps and verbose search runs.

A Logger writes timestamped lines to logs/YYYY/MM/DD/<name>_<stamp>.log
under the working directory (or an explicit directory) and, optionally,
to the console. Instances are callable, so they can be handed to any
component that takes a Callable[[str], None].
"""

import logging
import os
from datetime import datetime
from typing import Optional


class Logger:
	"""
	File + console logger with header/section helpers.

	Usage:
		logger = create_logger("sweep")
		logger.header("Rastrigin")
		logger.section("Brute Force")
		logger("Recursion Depth:\t3")
		logger.close()

	Attributes:
		name: Logger name (used for log filename)
		log_file: Path to the log file
	"""

	def __init__(
		self,
		name: str = "search",
		log_dir: Optional[str] = None,
		console: bool = True,
	):
		"""
		Args:
			name: Base name for the log file (e.g., "sweep")
			log_dir: Directory for the log file (default: ./logs/YYYY/MM/DD/)
			console: Whether to also log to console
		"""
		self.name = name

		now = datetime.now()
		if log_dir is None:
			log_dir = os.path.join("logs", now.strftime("%Y"), now.strftime("%m"), now.strftime("%d"))
		os.makedirs(log_dir, exist_ok=True)
		self.log_file = os.path.join(log_dir, f"{name}_{now.strftime('%Y%m%d_%H%M%S')}.log")

		# Private child of the "rpsearch" logger so instances never share handlers
		self._logger = logging.getLogger(f"rpsearch.{name}.{id(self)}")
		self._logger.setLevel(logging.INFO)
		self._logger.propagate = False

		formatter = logging.Formatter("%(asctime)s | %(message)s", datefmt="%H:%M:%S")
		handlers: list[logging.Handler] = [logging.FileHandler(self.log_file)]
		if console:
			handlers.append(logging.StreamHandler())
		for handler in handlers:
			handler.setFormatter(formatter)
			self._logger.addHandler(handler)

	def __call__(self, message: str = "") -> None:
		self.log(message)

	def log(self, message: str = "") -> None:
		self._logger.info(message)
		for handler in self._logger.handlers:
			handler.flush()

	def header(self, title: str) -> None:
		"""Major divider, one per objective function in a sweep."""
		self._divider(title, "=", 70)

	def section(self, title: str) -> None:
		"""Minor divider, one per selection strategy in a sweep."""
		self._divider(title, "-", 50)

	def _divider(self, title: str, char: str, width: int) -> None:
		self.log()
		self.log(char * width)
		self.log(f"  {title}")
		self.log(char * width)

	def close(self) -> None:
		"""Close and detach all handlers (releases the log file)."""
		for handler in list(self._logger.handlers):
			handler.close()
			self._logger.removeHandler(handler)

	def __repr__(self) -> str:
		return f"Logger(name='{self.name}', log_file='{self.log_file}')"


def create_logger(
	name: str = "search",
	log_dir: Optional[str] = None,
	console: bool = True,
) -> Logger:
	"""Factory function to create a Logger instance."""
	return Logger(name=name, log_dir=log_dir, console=console)
