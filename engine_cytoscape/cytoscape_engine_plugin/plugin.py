import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Sequence
from uuid import uuid4

from jinja2 import Environment, FileSystemLoader

from api.graph_view_api.services.engine_plugin import RenderingEnginePlugin
from .surface import HtmlSurface

LOGGER = logging.getLogger(__name__)

CYTOSCAPE_SCRIPT_URL = "https://unpkg.com/cytoscape@3.30.2/dist/cytoscape.min.js"

# Undirected edges are drawn without arrowheads regardless of the stylesheet.
UNDIRECTED_ARROWS = {"target-arrow-shape": "none", "source-arrow-shape": "none"}


@dataclass
class CytoscapeInstance:
    instance_id: str
    surface: HtmlSurface
    elements: list
    layout: dict
    destroyed: bool = False


def to_cytoscape_element(element: Mapping[str, Any]) -> dict:
    classes = list(element.get("classes") or [])
    style = dict(element.get("style") or {})
    if element.get("group") == "edges" and "undirected" in classes:
        style.update(UNDIRECTED_ARROWS)

    converted = {"group": element["group"], "data": dict(element["data"]), "classes": classes}
    if style:
        converted["style"] = style
    if "position" in element:
        converted["position"] = dict(element["position"])
    return converted


class CytoscapeEngine(RenderingEnginePlugin):
    def __init__(self, script_url: str = CYTOSCAPE_SCRIPT_URL, title: str = "Graph"):
        self.script_url = script_url
        self.title = title
        template_path = os.path.join(os.path.dirname(__file__), "templates")
        self._env = Environment(loader=FileSystemLoader(template_path))

    @property
    def plugin_id(self) -> str:
        return "cytoscape"

    @property
    def display_name(self) -> str:
        return "Cytoscape.js"

    def render_options_schema(self) -> dict:
        return {
            "script_url": {
                "type": "str",
                "label": "Cytoscape.js script URL",
                "required": False,
                "default": CYTOSCAPE_SCRIPT_URL,
            },
            "title": {
                "type": "str",
                "label": "Document title",
                "required": False,
                "default": "Graph",
            },
        }

    def create_instance(
        self,
        surface: Any,
        elements: Sequence[Mapping[str, Any]],
        style_rules: Sequence[Mapping[str, Any]],
        layout: Mapping[str, Any],
    ) -> CytoscapeInstance:
        if not isinstance(surface, HtmlSurface):
            raise TypeError(f"Cytoscape engine draws on HtmlSurface, got {type(surface).__name__}.")
        if not surface.is_empty:
            raise ValueError(f"Surface '{surface.container_id}' already holds rendered content.")

        # Cytoscape shares one id space between nodes and edges.
        seen = set()
        for element in elements:
            element_id = element["data"]["id"]
            if element_id in seen:
                raise ValueError(f"Element id '{element_id}' is used by both a node and an edge.")
            seen.add(element_id)

        cy_elements = [to_cytoscape_element(element) for element in elements]
        template = self._env.get_template("cytoscape.html")
        html = template.render(
            title=self.title,
            script_url=self.script_url,
            container_id=surface.container_id,
            width=surface.width,
            height=surface.height,
            elements=cy_elements,
            style=list(style_rules),
            layout=dict(layout),
        )

        surface.write(html)
        instance = CytoscapeInstance(
            instance_id=uuid4().hex,
            surface=surface,
            elements=cy_elements,
            layout=dict(layout),
        )
        LOGGER.debug("Created Cytoscape instance %s on %r", instance.instance_id, surface)
        return instance

    def destroy(self, handle: CytoscapeInstance) -> None:
        if handle.destroyed:
            raise RuntimeError(f"Cytoscape instance {handle.instance_id} was already destroyed.")
        handle.surface.clear()
        handle.destroyed = True
        LOGGER.debug("Destroyed Cytoscape instance %s", handle.instance_id)
