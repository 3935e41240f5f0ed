from __future__ import annotations

from typing import List, Tuple


class ExtractionError(Exception):
	"""Base class for failures reported to the caller of an extraction."""


class ResolutionError(ExtractionError):
	def __init__(self, import_path: str, reason: str = "package not found") -> None:
		super().__init__(f"{reason}: {import_path}")
		self.import_path = import_path
		self.reason = reason


# (path, line, column), 1-based
SyntaxProblem = Tuple[str, int, int]


class GoSyntaxError(ExtractionError):
	def __init__(self, problems: List[SyntaxProblem]) -> None:
		self.problems = list(problems)
		lines = [f"{path}:{line}:{col}: syntax error" for path, line, col in self.problems]
		super().__init__("\n".join(lines))


class InvariantViolation(RuntimeError):
	"""A type expression outside the known Go grammar reached the analyzer.

	Never caught by structviz itself: the model would be wrong if we went on.
	"""
