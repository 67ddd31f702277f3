"""Shared fixtures for the rpsearch test suite."""

import pytest

from rpsearch import Logger, Rastrigin


class RecordingRastrigin(Rastrigin):
	"""Rastrigin that remembers every fitness it computes."""

	def __init__(self):
		super().__init__()
		self.values: list[float] = []

	def calculate(self, vector) -> float:
		value = super().calculate(vector)
		self.values.append(value)
		return value


@pytest.fixture
def recording_rastrigin():
	return RecordingRastrigin()


@pytest.fixture
def file_logger(tmp_path):
	"""Quiet Logger writing under tmp_path, closed after the test."""
	logger = Logger("unit", log_dir=str(tmp_path), console=False)
	yield logger
	logger.close()

