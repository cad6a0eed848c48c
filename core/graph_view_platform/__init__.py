"""Viewer lifecycle, style resolution and plugin orchestration."""

from .config import LayoutMode, RenderConfig, resolve_layout_mode
from .engine import GraphEngine
from .registry import PluginRegistry
from .session import SURFACE_BINDINGS, SessionState, SurfaceBindings, ViewerSession
from .style import DEFAULT_STYLE, StyleRule, resolve_style
from .viewer import Viewer

__all__ = [
    "GraphEngine",
    "PluginRegistry",
    "Viewer",
    "ViewerSession",
    "SessionState",
    "SurfaceBindings",
    "SURFACE_BINDINGS",
    "RenderConfig",
    "LayoutMode",
    "resolve_layout_mode",
    "StyleRule",
    "DEFAULT_STYLE",
    "resolve_style",
]
