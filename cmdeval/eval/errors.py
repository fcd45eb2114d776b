# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from typing import Any

from ..core.diagnostics import Diagnostic
from ..core.span import Span


class EvalError(Exception):
	"""
	Fatal, position-annotated evaluation error.

	Raising it terminates evaluation of the current statement; the evaluator
	turns it into a `Diagnostic` for the renderer.
	"""

	code: str = "E-EVAL"

	def __init__(self, message: str, span: Span) -> None:
		super().__init__(message)
		self.message = message
		self.span = span

	def __str__(self) -> str:
		return self.format_human()

	def format_human(self) -> str:
		span = self.span
		if span.line is None:
			return f"{self.message} at [{span.begin}, {span.end})"
		return f"{self.message} at {span.file or '<unknown>'}:{span.line}:{span.column}"

	def to_diagnostic(self) -> Diagnostic:
		return Diagnostic(message=self.message, code=self.code, phase="eval", span=self.span)

	def to_dict(self) -> dict[str, Any]:
		return self.to_diagnostic().to_dict()


class UnwrapMismatch(EvalError):
	"""
	A value sequence failed an arity or type constraint.

	`expected` and `got` are free text: `expected` names the wanted kind
	("a single value", "string", "non-negative int", ...), `got` is a count,
	a kind name or the offending rendered value.
	"""

	code = "E-UNWRAP"

	def __init__(self, description: str, expected: str, got: str, span: Span) -> None:
		super().__init__(f"{description} must be {expected}; got {got}", span)
		self.description = description
		self.expected = expected
		self.got = got

	def to_diagnostic(self) -> Diagnostic:
		return Diagnostic(
			message=self.message,
			code=self.code,
			phase="eval",
			span=self.span,
			description=self.description,
		)

	def to_dict(self) -> dict[str, Any]:
		data = super().to_dict()
		data["expected"] = self.expected
		data["got"] = self.got
		return data


__all__ = ["EvalError", "UnwrapMismatch"]
