"""Listing configuration and render-mode selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MAX_TREE_DEPTH = 20


class RenderMode(Enum):
    FLAT = "flat"
    TABLE = "table"
    TREE = "tree"
    JSON = "json"


@dataclass(frozen=True)
class ListingConfig:
    path: str = "."
    show_hidden: bool = False
    long_format: bool = False
    interactive: bool = False
    tree: bool = False
    tree_depth: int | None = None
    json_output: bool = False
    color_scheme: str = "default"

    def __post_init__(self) -> None:
        if self.tree_depth is not None and self.tree_depth < 1:
            raise ValueError(f"tree_depth must be a positive integer, got {self.tree_depth}")

    @property
    def mode(self) -> RenderMode:
        """Pick the renderer: json, then tree, then long, else flat."""
        if self.json_output:
            return RenderMode.JSON
        if self.tree:
            return RenderMode.TREE
        if self.long_format:
            return RenderMode.TABLE
        return RenderMode.FLAT

    @property
    def depth_limit(self) -> int:
        """Effective recursion limit, never above :data:`MAX_TREE_DEPTH`."""
        if self.tree_depth is None:
            return MAX_TREE_DEPTH
        return min(self.tree_depth, MAX_TREE_DEPTH)
