import pytest

from paperfold.config import EditorSettings
from paperfold.editor import AdjacencyEngine, EditorSession
from paperfold.model.grid_registry import GridRegistry


@pytest.fixture
def settings():
    return EditorSettings()


@pytest.fixture
def registry(settings):
    return GridRegistry(settings)


@pytest.fixture
def engine(registry):
    return AdjacencyEngine(registry)


@pytest.fixture
def session(registry):
    return EditorSession(registry)
