"""End-to-end tests: datasource -> normalize -> viewer -> Cytoscape engine."""

import logging
import os

import pytest

from api.graph_view_api.services import RenderingEnginePlugin
from core.graph_view_platform.config import LayoutMode
from core.graph_view_platform.engine import GraphEngine
from core.graph_view_platform.registry import PluginRegistry
from datasource_json.datasource_json_plugin.plugin import JsonDatasourcePlugin
from engine_cytoscape.cytoscape_engine_plugin import CytoscapeEngine, HtmlSurface


class FakeEntryPoint:
    def __init__(self, name, loaded=None, error=None):
        self.name = name
        self.value = f"plugins:{name}"
        self._loaded = loaded
        self._error = error

    def load(self):
        if self._error is not None:
            raise self._error
        return self._loaded


@pytest.fixture
def registry():
    PluginRegistry.reset()
    registry = PluginRegistry()
    registry.register_datasource("json", JsonDatasourcePlugin)
    registry.register_engine("cytoscape", CytoscapeEngine)
    yield registry
    PluginRegistry.reset()


class TestPluginRegistry:

    def test_is_shared(self, registry):
        assert PluginRegistry() is registry

    def test_lists_registered_plugins(self, registry):
        assert "json" in registry.list_datasources()
        assert "cytoscape" in registry.list_engines()

    def test_unknown_plugin_is_none(self, registry):
        assert registry.get_engine("graphviz") is None

    def test_rejects_class_without_the_contract(self, registry):
        with pytest.raises(TypeError, match="RenderingEnginePlugin"):
            registry.register_engine("json", JsonDatasourcePlugin)
        with pytest.raises(TypeError, match="DataSourcePlugin"):
            registry.register_datasource("cytoscape", CytoscapeEngine)
        assert registry.get_engine("json") is None

    def test_broken_entry_points_are_skipped(self, caplog):
        table = {}
        entries = [
            FakeEntryPoint("broken", error=ImportError("no module named graphviz")),
            FakeEntryPoint("wrong", loaded=JsonDatasourcePlugin),
            FakeEntryPoint("cytoscape", loaded=CytoscapeEngine),
        ]
        with caplog.at_level(logging.WARNING):
            PluginRegistry._load_group(entries, RenderingEnginePlugin, table)

        assert table == {"cytoscape": CytoscapeEngine}
        assert "broken" in caplog.text
        assert "wrong" in caplog.text


class TestGraphEngine:

    def test_process_mounts_sample(self, registry, samples_dir):
        engine = GraphEngine(registry)
        surface = HtmlSurface("cy")

        session = engine.process("json", "cytoscape", os.path.join(samples_dir, "ejemplo1.json"), surface)

        assert session.layout_mode is LayoutMode.PRESET
        assert len(session.list_nodes()) == 18
        assert len(session.list_edges()) == 17
        assert "cytoscape(" in surface.content

        engine.close(session)
        assert surface.is_empty
        assert not session.is_mounted

    def test_one_viewer_per_engine(self, registry):
        engine = GraphEngine(registry)
        assert engine.viewer("cytoscape") is engine.viewer("cytoscape")

    def test_missing_plugins(self, registry):
        engine = GraphEngine(registry)
        with pytest.raises(ValueError, match="Datasource 'csv' not found"):
            engine.datasource("csv")
        with pytest.raises(ValueError, match="Rendering engine 'graphviz' not found"):
            engine.viewer("graphviz")

    def test_shutdown_releases_surfaces(self, registry, samples_dir):
        engine = GraphEngine(registry)
        surfaces = [HtmlSurface("one"), HtmlSurface("two")]
        for surface in surfaces:
            engine.process("json", "cytoscape", os.path.join(samples_dir, "modelo1.json"), surface)

        engine.shutdown()
        assert all(surface.is_empty for surface in surfaces)
        assert engine.viewer("cytoscape").live_sessions() == []
