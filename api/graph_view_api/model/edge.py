from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, Optional

from .node import freeze_mapping


class Directionality(str, Enum):
    DIRECTED = "directed"
    UNDIRECTED = "undirected"


@dataclass(frozen=True)
class Edge:
    edge_id: str
    source: str
    target: str
    directionality: Optional[Directionality] = None
    style_override: Mapping[str, Any] = field(default_factory=dict)
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.directionality is not None:
            object.__setattr__(self, "directionality", Directionality(self.directionality))
        object.__setattr__(self, "style_override", freeze_mapping(self.style_override))
        object.__setattr__(self, "attributes", freeze_mapping(self.attributes))

    @property
    def directed(self) -> bool:
        # Unspecified directionality renders as directed.
        return self.directionality is not Directionality.UNDIRECTED

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    def with_defaults(self) -> "Edge":
        if self.directionality is not None:
            return self
        return replace(self, directionality=Directionality.DIRECTED)

    def to_dict(self) -> dict:
        return {
            "id": self.edge_id,
            "source": self.source,
            "target": self.target,
            "directionality": self.directionality.value if self.directionality else None,
            "styleOverride": dict(self.style_override),
            "attributes": dict(self.attributes),
        }
