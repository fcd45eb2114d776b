# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
cmdeval.core: source positions and diagnostics.

Modules:
  - span: byte-offset source span with best-effort line/column
  - diagnostics: Diagnostic record handed to the renderer
"""

__all__ = [
    "diagnostics",
    "span",
]
