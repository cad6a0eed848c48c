"""Service-level plugin contracts for graph_view_api."""

from .datasource_plugin import DataSourcePlugin
from .engine_plugin import RenderingEnginePlugin

__all__ = ["DataSourcePlugin", "RenderingEnginePlugin"]
