"""JSON datasource for graph_view models."""

from .plugin import JsonDatasourcePlugin

__all__ = ["JsonDatasourcePlugin"]
