# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Evaluation context: the per-session object builtins report errors through.

`report_error` and `fail` never return; they raise, unwinding to the frame
that evaluates the current statement.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn, Sequence

from ..core.span import Span
from .errors import EvalError
from .unwrap import ValuesUnwrapper
from .values import Value

if TYPE_CHECKING:  # pragma: no cover
	from .ops import ValuesOp

logger = logging.getLogger(__name__)

_SUPPORTED_WORD_BITS = (32, 64)


@dataclass(frozen=True)
class EvalConfig:
	"""
	Knobs of an evaluation session.

	`word_bits` bounds integers parsed from strings to the signed range of a
	machine word of that width.
	"""

	word_bits: int = 64
	source_name: str = "[eval]"

	def __post_init__(self) -> None:
		if self.word_bits not in _SUPPORTED_WORD_BITS:
			raise ValueError(f"unsupported word size {self.word_bits}; expected one of {_SUPPORTED_WORD_BITS}")

	@property
	def min_int(self) -> int:
		return -(1 << (self.word_bits - 1))

	@property
	def max_int(self) -> int:
		return (1 << (self.word_bits - 1)) - 1


class EvalCtx:
	def __init__(self, source: str = "", config: EvalConfig | None = None) -> None:
		self.source = source
		self.config = config or EvalConfig()

	def span(self, begin: int, end: int) -> Span:
		return Span.from_offsets(begin, end, self.source, file=self.config.source_name)

	def report_error(self, begin: int, end: int, message: str) -> NoReturn:
		"""Abort the current evaluation with `message` pointing at `[begin, end)`."""
		self.fail(EvalError(message, self.span(begin, end)))

	def fail(self, err: EvalError) -> NoReturn:
		logger.debug("evaluation error [%d, %d): %s", err.span.begin, err.span.end, err.message)
		raise err

	def unwrap(self, description: str, begin: int, end: int, values: Sequence[Value]) -> ValuesUnwrapper:
		"""Wrap `values` produced by the source range `[begin, end)` for checking."""
		return ValuesUnwrapper(self, description, begin, end, tuple(values))

	def exec_and_unwrap(self, description: str, op: ValuesOp) -> ValuesUnwrapper:
		"""Execute `op` and wrap the values it produced."""
		return self.unwrap(description, op.begin, op.end, op.execute(self))


__all__ = ["EvalConfig", "EvalCtx"]
