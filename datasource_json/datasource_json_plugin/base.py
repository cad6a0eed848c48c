from __future__ import annotations

from abc import abstractmethod
from typing import Any, Mapping

from api.graph_view_api.model import GraphModel
from api.graph_view_api.services.datasource_plugin import DataSourcePlugin


class BaseDatasourcePlugin(DataSourcePlugin):
    # Base class for defining the flow of creating a GraphModel
    # The flow is always to first parse the source (this is different based on plugin)
    # and then turn the native {"nodes": [...], "edges": [...]} document into a model

    def load_graph(self, source: Any, **options: Any) -> GraphModel:
        raw_data = self._parse_source(source, **options)
        return GraphModel.from_dict(
            {
                "nodes": self._node_entries(raw_data),
                "edges": self._edge_entries(raw_data),
            }
        )

    @staticmethod
    def _resolve_path(source: Any, options: dict[str, Any]) -> str:
        if isinstance(source, str) and source.strip():
            return source
        fp = options.get("file_path")
        if isinstance(fp, str) and fp.strip():
            return fp
        raise ValueError("Missing file path. Provide it as 'source' or as option 'file_path'.")

    @abstractmethod
    def _parse_source(self, source: Any, **options: Any) -> Mapping[str, Any]:
        # Return a native document with 'nodes' and 'edges' lists
        pass

    @staticmethod
    def _entries(raw_data: Mapping[str, Any], key: str) -> list:
        entries = (raw_data or {}).get(key) or []
        if not isinstance(entries, list):
            raise ValueError(f"'{key}' must be a list, got {type(entries).__name__}.")
        return entries

    def _node_entries(self, raw_data: Mapping[str, Any]) -> list:
        return self._entries(raw_data, "nodes")

    def _edge_entries(self, raw_data: Mapping[str, Any]) -> list:
        return self._entries(raw_data, "edges")
