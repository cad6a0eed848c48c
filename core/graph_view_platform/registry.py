import logging
from importlib.metadata import entry_points
from typing import Dict, Type

from api.graph_view_api.services import DataSourcePlugin, RenderingEnginePlugin

LOGGER = logging.getLogger(__name__)

DATASOURCE_GROUP = "graph_view.datasource"
ENGINE_GROUP = "graph_view.engine"


def _check_plugin(name: str, plugin_cls, contract: type) -> None:
    if not isinstance(plugin_cls, type) or not issubclass(plugin_cls, contract):
        raise TypeError(f"Plugin '{name}' must be a {contract.__name__} subclass, got {plugin_cls!r}.")


class PluginRegistry:
    """
    Process-wide table of datasource and rendering engine plugin classes.

    Installed plugins are discovered once through entry points; tests and
    hosts may register more by hand. Entry points that fail to import or
    do not implement their contract are logged and skipped.
    """

    _instance = None
    _datasources: Dict[str, Type[DataSourcePlugin]]
    _engines: Dict[str, Type[RenderingEnginePlugin]]

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._datasources = {}
            cls._instance._engines = {}
            cls._instance._load_plugins()
        return cls._instance

    def _load_plugins(self):
        eps = entry_points()
        self._load_group(eps.select(group=DATASOURCE_GROUP), DataSourcePlugin, self._datasources)
        self._load_group(eps.select(group=ENGINE_GROUP), RenderingEnginePlugin, self._engines)

    @staticmethod
    def _load_group(eps, contract: type, table: dict) -> None:
        for ep in eps:
            try:
                plugin_cls = ep.load()
                _check_plugin(ep.name, plugin_cls, contract)
            except (ImportError, AttributeError, TypeError) as exc:
                LOGGER.warning("Skipping plugin entry point %s (%s): %s", ep.name, ep.value, exc)
                continue
            table[ep.name] = plugin_cls
            LOGGER.debug("Loaded %s plugin '%s'", contract.__name__, ep.name)

    def register_datasource(self, name: str, plugin_cls: Type[DataSourcePlugin]) -> None:
        _check_plugin(name, plugin_cls, DataSourcePlugin)
        self._datasources[name] = plugin_cls

    def register_engine(self, name: str, plugin_cls: Type[RenderingEnginePlugin]) -> None:
        _check_plugin(name, plugin_cls, RenderingEnginePlugin)
        self._engines[name] = plugin_cls

    def get_datasource(self, name: str) -> Type[DataSourcePlugin] | None:
        return self._datasources.get(name)

    def get_engine(self, name: str) -> Type[RenderingEnginePlugin] | None:
        return self._engines.get(name)

    def list_datasources(self) -> list[str]:
        return list(self._datasources.keys())

    def list_engines(self) -> list[str]:
        return list(self._engines.keys())

    @classmethod
    def reset(cls) -> None:
        """Forget the shared instance so the next access rescans entry points."""
        cls._instance = None
