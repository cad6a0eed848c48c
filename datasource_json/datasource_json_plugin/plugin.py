import json
import logging
from typing import Any, Mapping

from .base import BaseDatasourcePlugin

LOGGER = logging.getLogger(__name__)

FORMATS = ("auto", "native", "cytoscape")


class JsonDatasourcePlugin(BaseDatasourcePlugin):
    # Adapter to read a JSON graph document and map it to a GraphModel
    # Two shapes are accepted:
    #   native    - {"nodes": [{"id", "label", "type", "position", "styleOverride"}], "edges": [...]}
    #   cytoscape - element definitions {"data": {...}, "position", "style", "classes"},
    #               either grouped under nodes/edges or as one flat list with "group"

    @property
    def plugin_id(self) -> str:
        return "json"

    @property
    def display_name(self) -> str:
        return "JSON file"

    def parameters_schema(self) -> dict:
        return {
            "file_path": {
                "type": "str",
                "label": "Path to JSON file",
                "required": True,
            },
            "format": {
                "type": "str",
                "label": "Document format (auto, native, cytoscape)",
                "required": False,
                "default": "auto",
            },
        }

    def _parse_source(self, source, **kwargs) -> dict:
        fmt = kwargs.get("format", "auto")
        if fmt not in FORMATS:
            raise ValueError(f"Unknown format '{fmt}'. Expected one of {FORMATS}.")

        # Already parsed documents are accepted as they are
        if isinstance(source, (Mapping, list)):
            raw_json = source
        else:
            path = self._resolve_path(source, kwargs)
            with open(path, "r", encoding="utf-8") as f:
                raw_json = json.load(f)

        if fmt == "auto":
            fmt = "cytoscape" if self._looks_like_cytoscape(raw_json) else "native"
        LOGGER.debug("Parsing graph document as %s", fmt)

        if fmt == "native":
            if not isinstance(raw_json, Mapping):
                raise ValueError("Native graph documents must be an object with 'nodes' and 'edges'.")
            return dict(raw_json)
        return self._convert_cytoscape(raw_json)

    @staticmethod
    def _looks_like_cytoscape(raw_json: Any) -> bool:
        if isinstance(raw_json, list):
            return True
        if isinstance(raw_json, Mapping):
            if "elements" in raw_json:
                return True
            entries = list(raw_json.get("nodes") or []) + list(raw_json.get("edges") or [])
            return any(isinstance(e, Mapping) and "data" in e for e in entries)
        return False

    def _convert_cytoscape(self, raw_json: Any) -> dict:
        if isinstance(raw_json, Mapping) and "elements" in raw_json:
            raw_json = raw_json["elements"]

        if isinstance(raw_json, list):
            # Flat element list, edges are told apart by group or by source/target
            nodes, edges = [], []
            for element in raw_json:
                if not isinstance(element, Mapping):
                    raise ValueError(f"Cytoscape element must be an object: {element!r}")
                data = element.get("data") or {}
                group = element.get("group")
                if group == "edges" or (group is None and "source" in data):
                    edges.append(element)
                else:
                    nodes.append(element)
        elif isinstance(raw_json, Mapping):
            nodes = self._entries(raw_json, "nodes")
            edges = self._entries(raw_json, "edges")
        else:
            raise ValueError("Cytoscape documents must be an element list or an object.")

        return {
            "nodes": [self._convert_node(element) for element in nodes],
            "edges": [self._convert_edge(element) for element in edges],
        }

    @staticmethod
    def _split_data(element: Any, reserved: set) -> tuple:
        if not isinstance(element, Mapping) or not isinstance(element.get("data"), Mapping):
            raise ValueError(f"Cytoscape element must carry a 'data' object: {element!r}")
        data = element["data"]
        attributes = {k: v for k, v in data.items() if k not in reserved}
        return data, attributes

    def _convert_node(self, element: Mapping[str, Any]) -> dict:
        data, attributes = self._split_data(element, {"id", "label", "type"})
        entry = {
            "id": data.get("id"),
            "label": data.get("label"),
            "type": data.get("type"),
            "styleOverride": element.get("style") or {},
            "attributes": attributes,
        }
        if element.get("position") is not None:
            entry["position"] = element["position"]
        return entry

    def _convert_edge(self, element: Mapping[str, Any]) -> dict:
        data, attributes = self._split_data(element, {"id", "source", "target"})
        return {
            "id": data.get("id"),
            "source": data.get("source"),
            "target": data.get("target"),
            "directionality": "undirected" if "undirected" in self._classes(element) else None,
            "styleOverride": element.get("style") or {},
            "attributes": attributes,
        }

    @staticmethod
    def _classes(element: Mapping[str, Any]) -> list:
        classes = element.get("classes") or []
        if isinstance(classes, str):
            return classes.split()
        return list(classes)
