from __future__ import annotations

import logging
from typing import Any, List, Optional

from api.graph_view_api.errors import DoubleMountError
from api.graph_view_api.model import Edge, Node, ValidatedModel
from api.graph_view_api.services import RenderingEnginePlugin

from .config import RenderConfig, resolve_layout_mode
from .session import SURFACE_BINDINGS, ViewerSession
from .style import resolve_style

LOGGER = logging.getLogger(__name__)


def node_definition(node: Node, style: dict) -> dict:
    data = dict(node.attributes)
    data.update({"id": node.node_id, "label": node.display_label})
    if node.type is not None:
        data["type"] = node.type
    definition = {"group": "nodes", "data": data, "style": style, "classes": []}
    if node.position is not None:
        definition["position"] = node.position.to_dict()
    return definition


def edge_definition(edge: Edge, style: dict) -> dict:
    data = dict(edge.attributes)
    data.update({"id": edge.edge_id, "source": edge.source, "target": edge.target})
    classes = [] if edge.directed else ["undirected"]
    return {"group": "edges", "data": data, "style": style, "classes": classes}


class Viewer:
    """
    Binds validated graph models to rendering engine instances.

    Responsibilities:
    - One engine instance per mounted surface, across all viewers
    - No implicit replacement of a live session
    - Deterministic release on unmount
    """

    def __init__(self, engine: RenderingEnginePlugin):
        self.engine = engine
        self._bindings = SURFACE_BINDINGS

    # ==========================================================
    # LIFECYCLE
    # ==========================================================

    def mount(
        self,
        surface: Any,
        model: ValidatedModel,
        config: Optional[RenderConfig] = None,
    ) -> ViewerSession:
        if surface is None:
            raise ValueError("A drawing surface is required to mount a viewer.")
        if not isinstance(model, ValidatedModel):
            raise TypeError("Viewer.mount expects a ValidatedModel; call validate() or normalize() first.")

        live = self._bindings.live(surface)
        if live is not None:
            raise DoubleMountError(surface, live.session_id)

        config = config or RenderConfig()
        layout_mode = resolve_layout_mode(model)
        elements = tuple(
            [node_definition(n, resolve_style(n, config.style)) for n in model.nodes]
            + [edge_definition(e, resolve_style(e, config.style)) for e in model.edges]
        )
        LOGGER.debug("Resolved %d elements with %s layout", len(elements), layout_mode.value)

        handle = self.engine.create_instance(
            surface,
            list(elements),
            config.stylesheet(),
            config.layout_options(layout_mode),
        )

        session = ViewerSession(surface, model, layout_mode, elements, handle, owner=self)
        self._bindings.bind(surface, session)
        LOGGER.info(
            "Mounted session %s on %r using %s (%d nodes, %d edges)",
            session.session_id,
            surface,
            self.engine.display_name,
            len(model.nodes),
            len(model.edges),
        )
        return session

    def unmount(self, session: ViewerSession) -> None:
        if not session.is_mounted:
            LOGGER.debug("Session %s already unmounted; nothing to release.", session.session_id)
            return

        # The engine that created the instance is the one that releases it.
        owner = session.owner if session.owner is not None else self
        surface = session.surface
        handle = session._close()
        self._bindings.release(surface, session)
        owner.engine.destroy(handle)
        LOGGER.info("Unmounted session %s from %r", session.session_id, surface)

    def unmount_all(self) -> None:
        for session in self.live_sessions():
            try:
                self.unmount(session)
            except Exception:
                LOGGER.warning("Engine failed to release session %s.", session.session_id, exc_info=True)

    # ==========================================================
    # QUERIES
    # ==========================================================

    def is_bound(self, surface: Any) -> bool:
        return self._bindings.live(surface) is not None

    def session_for(self, surface: Any) -> Optional[ViewerSession]:
        return self._bindings.live(surface)

    def live_sessions(self) -> List[ViewerSession]:
        return [s for s in self._bindings.sessions() if s.owner is self]
