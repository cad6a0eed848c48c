"""
Graph element data model (Node, Edge, GraphModel).
"""

from .node import Node, Position
from .edge import Edge, Directionality
from .graph import GraphModel, ValidatedModel

__all__ = [
    "Node",
    "Position",
    "Edge",
    "Directionality",
    "GraphModel",
    "ValidatedModel",
]
