import pytest

from core.log import Log
from core.node import forest_from_dicts, sample_forest


@pytest.fixture(autouse=True)
def reset_log():
    Log.clear()
    Log.set_verbosity(0)
    yield
    Log.set_verbosity(0)


@pytest.fixture
def sample():
    return sample_forest()


@pytest.fixture
def forest():
    """
    P ─ A, B, C
    Q ─ D ─ E
    R (unloaded, advertises children)
    """
    return forest_from_dicts([
        {"id": "P", "name": "P", "hasChildren": True, "isExpanded": True, "children": [
            {"id": "A", "name": "A", "hasChildren": True, "isExpanded": True, "children": [
                {"id": "A1", "name": "A1"},
                {"id": "A2", "name": "A2"},
            ]},
            {"id": "B", "name": "B"},
            {"id": "C", "name": "C"},
        ]},
        {"id": "Q", "name": "Q", "hasChildren": True, "isExpanded": False, "children": [
            {"id": "D", "name": "D", "hasChildren": True, "children": [
                {"id": "E", "name": "E"},
            ]},
        ]},
        {"id": "R", "name": "R", "hasChildren": True},
    ])
