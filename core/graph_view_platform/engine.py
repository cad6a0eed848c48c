import logging
from typing import Any, Optional

from api.graph_view_api.model import ValidatedModel
from api.graph_view_api.services import DataSourcePlugin
from api.graph_view_api.validation import normalize

from .config import RenderConfig
from .registry import PluginRegistry
from .session import ViewerSession
from .viewer import Viewer

LOGGER = logging.getLogger(__name__)


class GraphEngine:
    """
    High-level orchestration layer.

    Responsibilities:
    - Plugin lookup
    - Loading and normalizing graph models
    - One Viewer per rendering engine
    """

    def __init__(self, registry: Optional[PluginRegistry] = None):
        self.registry = registry or PluginRegistry()
        self._viewers: dict[str, Viewer] = {}

    # ==========================================================
    # PLUGIN LOOKUP
    # ==========================================================

    def datasource(self, datasource_name: str) -> DataSourcePlugin:
        datasource_cls = self.registry.get_datasource(datasource_name)
        if not datasource_cls:
            raise ValueError(f"Datasource '{datasource_name}' not found.")
        return datasource_cls()

    def viewer(self, engine_name: str) -> Viewer:
        if engine_name not in self._viewers:
            engine_cls = self.registry.get_engine(engine_name)
            if not engine_cls:
                raise ValueError(f"Rendering engine '{engine_name}' not found.")
            self._viewers[engine_name] = Viewer(engine_cls())
        return self._viewers[engine_name]

    # ==========================================================
    # MAIN ORCHESTRATION
    # ==========================================================

    def load_model(self, datasource_name: str, source: Any, **options) -> ValidatedModel:
        graph = self.datasource(datasource_name).load_graph(source, **options)
        return normalize(graph)

    def process(
        self,
        datasource_name: str,
        engine_name: str,
        source: Any,
        surface: Any,
        config: Optional[RenderConfig] = None,
        **options,
    ) -> ViewerSession:
        model = self.load_model(datasource_name, source, **options)
        LOGGER.info("Loaded %r through '%s'", source, datasource_name)
        return self.viewer(engine_name).mount(surface, model, config)

    def close(self, session: ViewerSession) -> None:
        for viewer in self._viewers.values():
            if session in viewer.live_sessions():
                viewer.unmount(session)
                return
        LOGGER.debug("Session %s is not live in any viewer.", session.session_id)

    def shutdown(self) -> None:
        for viewer in self._viewers.values():
            viewer.unmount_all()
