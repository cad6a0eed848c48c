import os

import pytest

from api.graph_view_api.model import Edge, GraphModel, Node, Position
from api.graph_view_api.services import RenderingEnginePlugin
from api.graph_view_api.validation import normalize

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), "samples")


class RecordingEngine(RenderingEnginePlugin):
    """Engine double that records every instance it creates and destroys."""

    def __init__(self, fail_on_create: bool = False):
        self.fail_on_create = fail_on_create
        self.created = []
        self.destroyed = []

    @property
    def plugin_id(self) -> str:
        return "recording"

    @property
    def display_name(self) -> str:
        return "Recording engine"

    def create_instance(self, surface, elements, style_rules, layout):
        if self.fail_on_create:
            raise RuntimeError("engine refused to start")
        handle = {
            "surface": surface,
            "elements": list(elements),
            "style_rules": list(style_rules),
            "layout": dict(layout),
        }
        self.created.append(handle)
        return handle

    def destroy(self, handle):
        self.destroyed.append(handle)

    @property
    def alive(self) -> int:
        return len(self.created) - len(self.destroyed)


class Surface:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"Surface({self.name!r})"


@pytest.fixture
def engine():
    return RecordingEngine()


@pytest.fixture
def surface():
    return Surface("main")


@pytest.fixture
def preset_model():
    return normalize(
        GraphModel(
            nodes=(
                Node("base", position=Position(0, 0)),
                Node("x", position=Position(10, 0)),
            ),
            edges=(Edge("base-x", "base", "x"),),
        )
    )


@pytest.fixture
def auto_model():
    return normalize(
        GraphModel(
            nodes=(
                Node("n1", label="Input", type="source"),
                Node("n2", label="Processor", type="compute"),
                Node("n3", label="Output", type="sink", style_override={"background-color": "green"}),
            ),
            edges=(
                Edge("e1", "n1", "n2"),
                Edge("e2", "n2", "n3", directionality="undirected"),
            ),
        )
    )


@pytest.fixture
def samples_dir():
    return SAMPLES_DIR


@pytest.fixture
def failing_engine():
    return RecordingEngine(fail_on_create=True)


@pytest.fixture
def make_surface():
    return Surface


@pytest.fixture
def make_engine():
    return RecordingEngine
