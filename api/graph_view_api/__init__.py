"""Public API exports for graph_view_api models and plugin contracts."""

from .errors import (
    DanglingReferenceError,
    DoubleMountError,
    DuplicateIdError,
    GraphModelError,
    MixedLayoutError,
    SessionClosedError,
    ViewerError,
)
from .model import Directionality, Edge, GraphModel, Node, Position, ValidatedModel
from .services import DataSourcePlugin, RenderingEnginePlugin
from .validation import normalize, validate

__all__ = [
    "Node",
    "Edge",
    "Position",
    "Directionality",
    "GraphModel",
    "ValidatedModel",
    "validate",
    "normalize",
    "DataSourcePlugin",
    "RenderingEnginePlugin",
    "GraphModelError",
    "DuplicateIdError",
    "DanglingReferenceError",
    "MixedLayoutError",
    "ViewerError",
    "SessionClosedError",
    "DoubleMountError",
]
