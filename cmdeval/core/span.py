# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source span representation used by diagnostics.

Evaluation reports positions as `[begin, end)` byte offsets into the source
text. Line and column numbers are derived on demand so a renderer can point
at the span without re-scanning the source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Span:
	"""Represents a `[begin, end)` source range (plus best-effort line/column)."""

	file: Optional[str] = None
	begin: int = 0
	end: int = 0
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None

	@classmethod
	def from_offsets(cls, begin: int, end: int, source: str = "", file: Optional[str] = None) -> "Span":
		"""
		Build a Span from byte offsets, filling in 1-based line/column when the
		offsets fall inside `source`.
		"""
		if begin < 0 or end < begin:
			raise ValueError(f"invalid span offsets [{begin}, {end})")
		data = source.encode("utf-8")
		if end > len(data):
			return cls(file=file, begin=begin, end=end)
		line, column = _line_col(data, begin)
		end_line, end_column = _line_col(data, end)
		return cls(
			file=file,
			begin=begin,
			end=end,
			line=line,
			column=column,
			end_line=end_line,
			end_column=end_column,
		)

	def is_empty(self) -> bool:
		return self.begin == self.end


def _line_col(data: bytes, offset: int) -> tuple[int, int]:
	line = data.count(b"\n", 0, offset) + 1
	column = offset - (data.rfind(b"\n", 0, offset) + 1) + 1
	return line, column


__all__ = ["Span"]
