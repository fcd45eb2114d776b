# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Runtime values.

The value set is closed: every runtime datum is one of the dataclasses below.
Scalars are text (`String`); numbers only exist as parses of strings done by
the unwrappers. Capabilities are probed with try-convert methods that return
the narrowed value or `None`.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Sequence

if TYPE_CHECKING:  # pragma: no cover
	from .context import EvalCtx


class Value:
	"""Base class of all runtime values."""

	def kind(self) -> str:
		raise NotImplementedError

	def as_string(self) -> String | None:
		return None

	def as_callable(self) -> Callable | None:
		return None

	def as_iterable(self) -> Iterable | None:
		return None


class Callable(Value):
	"""Capability: the value can be invoked with a list of argument values."""

	def as_callable(self) -> Callable | None:
		return self

	def call(self, ctx: EvalCtx, args: Sequence[Value]) -> list[Value]:
		raise NotImplementedError


class Iterable(Value):
	"""Capability: the value yields a sequence of element values."""

	def as_iterable(self) -> Iterable | None:
		return self

	def iterate(self) -> Iterator[Value]:
		raise NotImplementedError


@dataclass(frozen=True)
class String(Value):
	text: str

	def kind(self) -> str:
		return "string"

	def as_string(self) -> String | None:
		return self

	def __str__(self) -> str:
		return self.text


@dataclass(frozen=True)
class Bool(Value):
	value: bool

	def kind(self) -> str:
		return "bool"


@dataclass(frozen=True)
class List(Iterable):
	items: tuple[Value, ...] = ()

	def kind(self) -> str:
		return "list"

	def iterate(self) -> Iterator[Value]:
		return iter(self.items)


@dataclass(frozen=True)
class Map(Iterable):
	"""Ordered map; iterating yields the keys."""

	entries: tuple[tuple[Value, Value], ...] = ()

	def kind(self) -> str:
		return "map"

	def iterate(self) -> Iterator[Value]:
		return (k for k, _ in self.entries)


BuiltinImpl = typing.Callable[["EvalCtx", Sequence[Value]], typing.List[Value]]


@dataclass(frozen=True)
class BuiltinFn(Callable):
	name: str
	impl: BuiltinImpl = field(compare=False)

	def kind(self) -> str:
		return "fn"

	def call(self, ctx: EvalCtx, args: Sequence[Value]) -> list[Value]:
		return self.impl(ctx, args)


ClosureBody = typing.Callable[["EvalCtx", typing.Dict[str, Value]], typing.List[Value]]


@dataclass(frozen=True)
class Closure(Callable):
	"""User-defined function: positional parameters bound by name for `body`."""

	params: tuple[str, ...]
	body: ClosureBody = field(compare=False)

	def kind(self) -> str:
		return "fn"

	def call(self, ctx: EvalCtx, args: Sequence[Value]) -> list[Value]:
		if len(args) != len(self.params):
			raise RuntimeError(f"closure expects {len(self.params)} args, got {len(args)}")
		return self.body(ctx, dict(zip(self.params, args)))


__all__ = [
	"Bool",
	"BuiltinFn",
	"Callable",
	"Closure",
	"Iterable",
	"List",
	"Map",
	"String",
	"Value",
]
