"""Cytoscape.js rendering engine for graph_view."""

from .plugin import CytoscapeEngine, CytoscapeInstance
from .surface import HtmlSurface

__all__ = ["CytoscapeEngine", "CytoscapeInstance", "HtmlSurface"]
