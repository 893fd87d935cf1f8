"""Renderers for flat, table, tree and JSON listings."""

from fls.render.flat import render_flat
from fls.render.jsondoc import render_document
from fls.render.table import render_table
from fls.render.tree import render_tree

__all__ = ["render_document", "render_flat", "render_table", "render_tree"]
