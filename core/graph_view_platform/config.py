"""Render configuration and layout selection."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Tuple

from api.graph_view_api.errors import MixedLayoutError
from api.graph_view_api.model import GraphModel

from .style import DEFAULT_STYLE, StyleRule, as_rules


class LayoutMode(str, Enum):
    PRESET = "preset"
    AUTOMATIC = "automatic"


def resolve_layout_mode(model: GraphModel) -> LayoutMode:
    """PRESET when every node is positioned, AUTOMATIC when none is."""
    if not model.has_positions():
        return LayoutMode.AUTOMATIC
    positioned = [node.node_id for node in model.nodes if node.position is not None]
    if len(positioned) == len(model.nodes):
        return LayoutMode.PRESET
    unpositioned = [node.node_id for node in model.nodes if node.position is None]
    raise MixedLayoutError(positioned, unpositioned)


@dataclass(frozen=True)
class RenderConfig:
    style: Tuple[StyleRule, ...] = DEFAULT_STYLE
    auto_layout: str = "grid"
    fit: bool = True

    def __post_init__(self):
        object.__setattr__(self, "style", as_rules(self.style))
        if not isinstance(self.auto_layout, str) or not self.auto_layout:
            raise ValueError("auto_layout must be a non-empty layout name.")
        if self.auto_layout == LayoutMode.PRESET.value:
            raise ValueError("'preset' is selected from node positions, not configured.")

    def layout_options(self, mode: LayoutMode) -> dict:
        if mode is LayoutMode.PRESET:
            return {"name": "preset"}
        return {"name": self.auto_layout, "fit": self.fit}

    def stylesheet(self) -> list:
        return [rule.to_dict() for rule in self.style]

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "RenderConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(options) - known
        if unknown:
            raise ValueError(f"Unknown render options: {sorted(unknown)}")
        return cls(**dict(options))
