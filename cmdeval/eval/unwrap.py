# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Unwrappers: assert properties of runtime values, failing with a located error.

A `ValuesUnwrapper` narrows the arity of a value sequence; `one()` yields a
`ValueUnwrapper` which narrows or coerces the single value. Every failure
raises `UnwrapMismatch` with the message
`"<description> must be <expected>; got <got>"` addressed at the source range
of the checked sub-expression. Integers are parses of the string kind, never
a kind of their own.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn

from .errors import UnwrapMismatch
from .values import Callable, Iterable, String, Value

if TYPE_CHECKING:  # pragma: no cover
	from .context import EvalConfig, EvalCtx

# ASCII digits only; int() alone would also accept blanks, underscores and
# non-ASCII digits.
_INT_RE = re.compile(r"[+-]?[0-9]+")
_MAX_DIGITS = 20

FD_CLOSE = -1


def parse_int(text: str, config: EvalConfig) -> int | None:
	"""Parse a base-10 word-sized integer, returning None when `text` is not one."""
	if _INT_RE.fullmatch(text) is None:
		return None
	digits = text.lstrip("+-").lstrip("0") or "0"
	# More significant digits than any supported word holds.
	if len(digits) > _MAX_DIGITS:
		return None
	i = int(digits)
	if text.startswith("-"):
		i = -i
	if i < config.min_int or i > config.max_int:
		return None
	return i


@dataclass(frozen=True)
class _Unwrapper:
	# ctx is the evaluation context errors are reported through.
	ctx: EvalCtx
	# description names what is being unwrapped in error messages.
	description: str
	# [begin, end) is the source range pointed at on error.
	begin: int
	end: int
	values: tuple[Value, ...]

	def _error(self, expected: str, got: str) -> NoReturn:
		span = self.ctx.span(self.begin, self.end)
		self.ctx.fail(UnwrapMismatch(self.description, expected, got, span))


@dataclass(frozen=True)
class ValuesUnwrapper(_Unwrapper):
	"""Unwraps a sequence of values."""

	def one(self) -> ValueUnwrapper:
		"""Unwrap the sequence to exactly one value."""
		if len(self.values) != 1:
			self._error("a single value", f"{len(self.values)} values")
		return ValueUnwrapper(self.ctx, self.description, self.begin, self.end, self.values)


@dataclass(frozen=True)
class ValueUnwrapper(_Unwrapper):
	"""Unwraps one value. Only `ValuesUnwrapper.one` should build it."""

	def __post_init__(self) -> None:
		if len(self.values) != 1:
			raise ValueError(f"ValueUnwrapper needs exactly one value, got {len(self.values)}")

	@property
	def value(self) -> Value:
		return self.values[0]

	def any(self) -> Value:
		return self.value

	def string(self) -> String:
		s = self.value.as_string()
		if s is None:
			self._error("string", self.value.kind())
		return s

	def integer(self) -> int:
		s = self.string().text
		i = parse_int(s, self.ctx.config)
		if i is None:
			self._error("integer", s)
		return i

	def non_negative_int(self) -> int:
		i = self.integer()
		if i < 0:
			self._error("non-negative int", str(i))
		return i

	def fd_or_close(self) -> int:
		"""
		Unwrap a file descriptor: `-` means "close" and yields FD_CLOSE, anything
		else must be a non-negative integer.
		"""
		s = self.string().text
		if s == "-":
			return FD_CLOSE
		i = parse_int(s, self.ctx.config)
		if i is None:
			self._error("non-negative int", s)
		if i < 0:
			self._error("non-negative int", str(i))
		return i

	def callable(self) -> Callable:
		c = self.value.as_callable()
		if c is None:
			self._error("callable", self.value.kind())
		return c

	def iterable(self) -> Iterable:
		it = self.value.as_iterable()
		if it is None:
			self._error("iterable", self.value.kind())
		return it


__all__ = ["FD_CLOSE", "ValueUnwrapper", "ValuesUnwrapper", "parse_int"]
