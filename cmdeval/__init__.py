# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
cmdeval package: value unwrapping for a dynamically-typed command language.

Subpackages:
  core: source spans and diagnostics shared with the renderer
  eval: runtime values, evaluation context and unwrappers
"""

__all__ = ["core", "eval"]
