from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple
from uuid import uuid4

from api.graph_view_api.errors import SessionClosedError
from api.graph_view_api.model import Edge, Node, ValidatedModel

from .config import LayoutMode


class SessionState(str, Enum):
    MOUNTED = "mounted"
    UNMOUNTED = "unmounted"


class ViewerSession:
    """
    Handle for one engine instance bound to one surface.

    Sessions are created MOUNTED by Viewer.mount and move to UNMOUNTED
    exactly once. Every accessor raises SessionClosedError afterwards;
    handles are never reused.
    """

    def __init__(
        self,
        surface: Any,
        model: ValidatedModel,
        layout_mode: LayoutMode,
        elements: Tuple[dict, ...],
        handle: Any,
        owner: Any = None,
    ):
        self.session_id = uuid4().hex
        self.owner = owner
        self._surface = surface
        self._model = model
        self._layout_mode = layout_mode
        self._elements = elements
        self._handle = handle
        self._state = SessionState.MOUNTED

    def __repr__(self) -> str:
        return f"<ViewerSession {self.session_id} {self._state.value}>"

    # ==========================================================
    # STATE
    # ==========================================================

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_mounted(self) -> bool:
        return self._state is SessionState.MOUNTED

    def _ensure_open(self) -> None:
        if self._state is not SessionState.MOUNTED:
            raise SessionClosedError(self.session_id)

    def _close(self) -> Any:
        """Move to UNMOUNTED and hand back the engine handle for release."""
        handle = self._handle
        self._state = SessionState.UNMOUNTED
        self._handle = None
        self._elements = ()
        return handle

    # ==========================================================
    # BINDING
    # ==========================================================

    @property
    def surface(self) -> Any:
        self._ensure_open()
        return self._surface

    @property
    def handle(self) -> Any:
        self._ensure_open()
        return self._handle

    @property
    def model(self) -> ValidatedModel:
        self._ensure_open()
        return self._model

    @property
    def layout_mode(self) -> LayoutMode:
        self._ensure_open()
        return self._layout_mode

    @property
    def elements(self) -> Tuple[dict, ...]:
        self._ensure_open()
        return self._elements

    # ==========================================================
    # NODE / EDGE QUERIES
    # ==========================================================

    def list_nodes(self) -> List[Node]:
        return list(self.model.nodes)

    def list_edges(self) -> List[Edge]:
        return list(self.model.edges)

    def find_node(self, node_id: str) -> Optional[Node]:
        return self.model.get_node(node_id)

    def filter_nodes(self, predicate: Callable[[Node], bool]) -> List[Node]:
        return [node for node in self.list_nodes() if predicate(node)]

    def find_nodes_by_label(self, label_substr: str) -> List[Node]:
        """Return nodes whose label contains the given substring."""
        needle = label_substr.lower()
        return self.filter_nodes(lambda n: needle in n.display_label.lower())

    def find_nodes_by_type(self, node_type: str) -> List[Node]:
        return self.filter_nodes(lambda n: n.type == node_type)

    def resolved_style(self, element_id: str) -> dict:
        """Return the style the engine received for a node or edge id."""
        for element in self.elements:
            if element["data"]["id"] == element_id:
                return dict(element["style"])
        raise KeyError(element_id)


class SurfaceBindings:
    """
    Surface -> live session table shared by every Viewer in the process.

    A surface holds at most one MOUNTED session. Entries whose session is
    no longer mounted count as free.
    """

    def __init__(self):
        self._sessions: Dict[Any, ViewerSession] = {}

    def live(self, surface: Any) -> Optional[ViewerSession]:
        session = self._sessions.get(surface)
        if session is not None and not session.is_mounted:
            del self._sessions[surface]
            return None
        return session

    def bind(self, surface: Any, session: ViewerSession) -> None:
        self._sessions[surface] = session

    def release(self, surface: Any, session: ViewerSession) -> None:
        if self._sessions.get(surface) is session:
            del self._sessions[surface]

    def sessions(self) -> List[ViewerSession]:
        return [s for s in list(self._sessions.values()) if s.is_mounted]


SURFACE_BINDINGS = SurfaceBindings()
