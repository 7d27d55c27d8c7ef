import importlib
import pathlib


def test_package_importable():
    """Ensure the roadtrip package can be imported without side-effects."""
    pkg = importlib.import_module("roadtrip")
    assert hasattr(pkg, "logger")
    assert hasattr(pkg, "RoadTrip")


def test_project_paths_are_paths():
    pkg = importlib.import_module("roadtrip")
    assert isinstance(pkg.DATA_DIR, pathlib.Path)
    assert pkg.DATA_DIR.parent == pkg.PROJECT_ROOT
