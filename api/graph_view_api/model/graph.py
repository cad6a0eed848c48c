from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from ..errors import DanglingReferenceError, DuplicateIdError
from .edge import Directionality, Edge
from .node import Node, Position


@dataclass(frozen=True)
class GraphModel:
    """
    Immutable description of a graph: ordered nodes and ordered edges.

    Parallel edges and self-loops are allowed. Order carries no meaning
    for rendering but is kept so snapshots stay deterministic.
    """

    nodes: Tuple[Node, ...] = ()
    edges: Tuple[Edge, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

    # -----------------
    # LOOKUPS
    # -----------------

    def get_node(self, node_id: str) -> Optional[Node]:
        for node in self.nodes:
            if node.node_id == node_id:
                return node
        return None

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        for edge in self.edges:
            if edge.edge_id == edge_id:
                return edge
        return None

    def has_positions(self) -> bool:
        return any(node.position is not None for node in self.nodes)

    # -----------------
    # SERIALIZATION
    # -----------------

    def to_dict(self) -> dict:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }

    @classmethod
    def from_dict(cls, document: Mapping[str, Any]) -> "GraphModel":
        if not isinstance(document, Mapping):
            raise ValueError("Graph document must be a mapping with 'nodes' and 'edges'.")
        nodes = [_node_from_dict(raw) for raw in document.get("nodes") or []]
        edges = [_edge_from_dict(raw) for raw in document.get("edges") or []]
        return cls(nodes=tuple(nodes), edges=tuple(edges))


@dataclass(frozen=True)
class ValidatedModel(GraphModel):
    """A GraphModel whose ids are unique and whose edges all resolve."""

    def __post_init__(self):
        super().__post_init__()
        check_integrity(self.nodes, self.edges)


def check_integrity(nodes: Tuple[Node, ...], edges: Tuple[Edge, ...]) -> None:
    """Raise on duplicate node/edge ids or edges pointing at missing nodes."""
    node_ids = set()
    for node in nodes:
        if node.node_id in node_ids:
            raise DuplicateIdError("node", node.node_id)
        node_ids.add(node.node_id)

    edge_ids = set()
    for edge in edges:
        if edge.edge_id in edge_ids:
            raise DuplicateIdError("edge", edge.edge_id)
        edge_ids.add(edge.edge_id)

    for edge in edges:
        for endpoint in (edge.source, edge.target):
            if endpoint not in node_ids:
                raise DanglingReferenceError(edge.edge_id, endpoint)


NODE_KEYS = frozenset({"id", "label", "type", "position", "styleOverride", "style", "attributes"})
EDGE_KEYS = frozenset({"id", "source", "target", "directionality", "styleOverride", "style", "attributes"})


def _check_keys(raw: Mapping[str, Any], allowed: frozenset, kind: str) -> None:
    unknown = set(raw) - allowed
    if unknown:
        raise ValueError(f"Unknown {kind} keys {sorted(unknown)} in {dict(raw)!r}")


def _style_override(raw: Mapping[str, Any], kind: str) -> Mapping[str, Any]:
    # "style" is accepted as an alias of "styleOverride"
    if "styleOverride" in raw and "style" in raw:
        raise ValueError(f"{kind.capitalize()} {raw.get('id')!r} sets both 'styleOverride' and 'style'.")
    style = raw.get("styleOverride", raw.get("style")) or {}
    if not isinstance(style, Mapping):
        raise ValueError(f"Style override of {kind} {raw.get('id')!r} must be a mapping.")
    return style


def _require_id(raw: Mapping[str, Any], key: str, kind: str) -> str:
    value = raw.get(key)
    if value is None or str(value) == "":
        raise ValueError(f"{kind.capitalize()} entry is missing '{key}': {dict(raw)!r}")
    return str(value)


def _node_from_dict(raw: Any) -> Node:
    if not isinstance(raw, Mapping):
        raise ValueError(f"Node entry must be a mapping, got {type(raw).__name__}.")
    _check_keys(raw, NODE_KEYS, "node")
    position = raw.get("position")
    label = raw.get("label")
    return Node(
        node_id=_require_id(raw, "id", "node"),
        label=str(label) if label is not None else None,
        type=raw.get("type"),
        position=Position.from_dict(position) if position is not None else None,
        style_override=_style_override(raw, "node"),
        attributes=raw.get("attributes") or {},
    )


def _edge_from_dict(raw: Any) -> Edge:
    if not isinstance(raw, Mapping):
        raise ValueError(f"Edge entry must be a mapping, got {type(raw).__name__}.")
    _check_keys(raw, EDGE_KEYS, "edge")
    directionality = raw.get("directionality")
    try:
        directionality = Directionality(directionality) if directionality is not None else None
    except ValueError as exc:
        raise ValueError(f"Unknown directionality {directionality!r} on edge {raw.get('id')!r}.") from exc
    return Edge(
        edge_id=_require_id(raw, "id", "edge"),
        source=_require_id(raw, "source", "edge"),
        target=_require_id(raw, "target", "edge"),
        directionality=directionality,
        style_override=_style_override(raw, "edge"),
        attributes=raw.get("attributes") or {},
    )
