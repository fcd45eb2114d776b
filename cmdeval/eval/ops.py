# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import typing
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from .values import Value

if TYPE_CHECKING:  # pragma: no cover
	from .context import EvalCtx

ValuesExec = typing.Callable[["EvalCtx"], Sequence[Value]]


@dataclass(frozen=True)
class ValuesOp:
	"""A compiled sub-expression that produces values, with its source range."""

	begin: int
	end: int
	exec: ValuesExec = field(compare=False)

	def execute(self, ctx: EvalCtx) -> list[Value]:
		return list(self.exec(ctx))

	@classmethod
	def literal(cls, begin: int, end: int, values: Sequence[Value]) -> "ValuesOp":
		"""An op that always yields `values`."""
		frozen = tuple(values)
		return cls(begin, end, lambda _ctx: frozen)


__all__ = ["ValuesOp"]
