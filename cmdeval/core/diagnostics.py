"""
Diagnostic record handed to the diagnostic renderer.

Rendering (source excerpts, underlines, colors) is the renderer's job; this
module only fixes the record and its JSON shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .span import Span


@dataclass(frozen=True)
class Diagnostic:
	"""An evaluation diagnostic pointing at the checked sub-expression."""

	message: str
	code: str | None = None
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)
	# Label of the checked construct ("argument to close"), when the
	# diagnostic comes from a value check.
	description: str | None = None

	def to_dict(self) -> dict[str, Any]:
		return {
			"phase": self.phase,
			"code": self.code,
			"message": self.message,
			"severity": self.severity,
			"description": self.description,
			"file": self.span.file,
			"line": self.span.line,
			"column": self.span.column,
			"begin": self.span.begin,
			"end": self.span.end,
		}
