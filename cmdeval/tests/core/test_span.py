# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from cmdeval.core.diagnostics import Diagnostic
from cmdeval.core.span import Span


def test_span_line_and_column_from_offsets() -> None:
	source = "echo a\nclose -\n"
	span = Span.from_offsets(13, 14, source, file="x.elv")
	assert (span.begin, span.end) == (13, 14)
	assert (span.line, span.column) == (2, 7)
	assert (span.end_line, span.end_column) == (2, 8)
	assert span.file == "x.elv"


def test_span_offsets_count_bytes() -> None:
	source = "é x"
	span = Span.from_offsets(3, 4, source)
	assert (span.line, span.column) == (1, 4)


def test_span_past_source_keeps_offsets_only() -> None:
	span = Span.from_offsets(10, 12, "short")
	assert (span.begin, span.end) == (10, 12)
	assert span.line is None and span.column is None


def test_empty_span() -> None:
	assert Span.from_offsets(5, 5).is_empty()
	assert not Span.from_offsets(5, 9).is_empty()


@pytest.mark.parametrize("begin,end", [(-1, 0), (4, 3)])
def test_span_rejects_invalid_offsets(begin: int, end: int) -> None:
	with pytest.raises(ValueError):
		Span.from_offsets(begin, end)


def test_diagnostic_to_dict_shape() -> None:
	diag = Diagnostic(message="boom", code="E-X", phase="eval", span=Span.from_offsets(0, 4, "boom", file="f"))
	assert diag.to_dict() == {
		"phase": "eval",
		"code": "E-X",
		"message": "boom",
		"severity": "error",
		"description": None,
		"file": "f",
		"line": 1,
		"column": 1,
		"begin": 0,
		"end": 4,
	}
