# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
cmdeval.eval: runtime values and the unwrapping layer used by builtins.

Builtins receive value sequences whose kinds are only known at run time. They
narrow them with a fluent chain rooted at the evaluation context:

	fd = ctx.exec_and_unwrap("redirection source", op).one().fd_or_close()

Any violated constraint raises `UnwrapMismatch`, which aborts the current
evaluation and carries the source span of the checked sub-expression.
"""

from __future__ import annotations

from .context import EvalConfig, EvalCtx
from .errors import EvalError, UnwrapMismatch
from .ops import ValuesOp
from .unwrap import ValueUnwrapper, ValuesUnwrapper
from .values import Bool, BuiltinFn, Callable, Closure, Iterable, List, Map, String, Value

__all__ = [
	"Bool",
	"BuiltinFn",
	"Callable",
	"Closure",
	"EvalConfig",
	"EvalCtx",
	"EvalError",
	"Iterable",
	"List",
	"Map",
	"String",
	"UnwrapMismatch",
	"Value",
	"ValueUnwrapper",
	"ValuesOp",
	"ValuesUnwrapper",
]
