"""Packaging correctness verification for json-navigator.

Tests validate:
- Base install imports without optional test dependencies being touched
- py.typed marker ships inside the package
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the current installation and source tree rather than
building wheels (faster, more reliable in CI).
"""

from __future__ import annotations

import importlib
from importlib.metadata import entry_points, metadata
from pathlib import Path

import json_navigator

PACKAGE_DIR = Path(json_navigator.__file__).parent


class TestBaseInstall:
    """The package imports and works with only its runtime dependency."""

    def test_top_level_api(self) -> None:
        assert hasattr(json_navigator, "parse")
        assert hasattr(json_navigator, "resolve")
        assert hasattr(json_navigator, "find")
        assert hasattr(json_navigator, "wrap")

    def test_parse_basic(self) -> None:
        assert json_navigator.parse('{"a": 1}').resolve("a").get_integer_value() == 1

    def test_subpackages_import(self) -> None:
        for name in ("tree", "path", "coercion", "integrations"):
            importlib.import_module(f"json_navigator.{name}")


class TestPackageContents:
    def test_py_typed_marker(self) -> None:
        assert (PACKAGE_DIR / "py.typed").is_file()


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self) -> None:
        eps = [
            ep
            for ep in entry_points(group="pytest11")
            if ep.value == "json_navigator.integrations._pytest_plugin"
        ]
        assert eps, "No pytest11 entry point found for json-navigator"

    def test_fixture_available(self) -> None:
        mod = importlib.import_module("json_navigator.integrations._pytest_plugin")
        assert hasattr(mod, "assert_json_path")


class TestPackageMetadata:
    def test_distribution_metadata(self) -> None:
        meta = metadata("json-navigator")
        assert meta["Name"] == "json-navigator"
        assert meta["Version"] == json_navigator.__version__

    def test_all_exports(self) -> None:
        expected = {
            "CoercionError",
            "IndexOutOfBoundsError",
            "IndexStep",
            "KeyNotFoundError",
            "KeyStep",
            "NavigatorConfig",
            "NavigatorError",
            "Node",
            "PathResolver",
            "PathSyntaxError",
            "Shape",
            "TypeMismatchError",
            "find",
            "parse",
            "resolve",
            "wrap",
        }
        actual = set(json_navigator.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
