from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional


def freeze_mapping(values: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Return a read-only copy of ``values`` (an empty mapping for ``None``)."""
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class Position:
    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Position":
        try:
            return cls(x=float(raw["x"]), y=float(raw["y"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Invalid position {raw!r}: expected numeric 'x' and 'y'.") from exc


@dataclass(frozen=True)
class Node:
    node_id: str
    label: Optional[str] = None
    type: Optional[str] = None
    position: Optional[Position] = None
    style_override: Mapping[str, Any] = field(default_factory=dict)
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "style_override", freeze_mapping(self.style_override))
        object.__setattr__(self, "attributes", freeze_mapping(self.attributes))

    @property
    def display_label(self) -> str:
        return self.label if self.label is not None else self.node_id

    def with_defaults(self) -> "Node":
        if self.label is not None:
            return self
        return replace(self, label=self.node_id)

    def to_dict(self) -> dict:
        data = {
            "id": self.node_id,
            "label": self.label,
            "type": self.type,
            "styleOverride": dict(self.style_override),
            "attributes": dict(self.attributes),
        }
        if self.position is not None:
            data["position"] = self.position.to_dict()
        return data
