# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shared helpers for tests that build evaluation contexts and value sequences.
"""

from __future__ import annotations

from typing import Sequence

from cmdeval.eval import EvalConfig, EvalCtx, String, ValuesUnwrapper, Value


def make_ctx(source: str = "", *, word_bits: int = 64) -> EvalCtx:
	return EvalCtx(source, EvalConfig(word_bits=word_bits, source_name="test.elv"))


def strs(*texts: str) -> list[Value]:
	return [String(t) for t in texts]


def unwrap_values(
	values: Sequence[Value],
	*,
	description: str = "value",
	begin: int = 0,
	end: int = 0,
	ctx: EvalCtx | None = None,
) -> ValuesUnwrapper:
	"""Unwrap `values` through a fresh context unless one is given."""
	return (ctx or make_ctx()).unwrap(description, begin, end, values)


def unwrap_str(text: str, *, description: str = "value", begin: int = 0, end: int = 0) -> ValuesUnwrapper:
	return unwrap_values(strs(text), description=description, begin=begin, end=end)


__all__ = ["make_ctx", "strs", "unwrap_str", "unwrap_values"]
