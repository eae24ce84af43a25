import importlib
import pytest

@pytest.mark.parametrize("module", [
    "kmeans2d",
    "kmeans2d.algorithms",
    "kmeans2d.assignments",
    "kmeans2d.updates",
    "kmeans2d.distances",
    "kmeans2d.initialization",
    "kmeans2d.utils",
    "kmeans2d.visualization",
])
def test_submodules_exist(module):
    mod = importlib.import_module(module)
    assert mod is not None


def test_public_names_exported():
    import kmeans2d
    for name in kmeans2d.__all__:
        assert hasattr(kmeans2d, name), f"kmeans2d.{name} should exist"
