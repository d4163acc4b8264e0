"""pytest plugin for json-navigator.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_navigator import Node, NavigatorError, resolve


@pytest.fixture(scope="session")
def assert_json_path() -> Any:
    """Fixture that returns a callable asserting the value at a JSON path.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_menu(assert_json_path):
            assert_json_path('{"menu": {"id": "file"}}', "menu.id", "file")

        def test_missing(assert_json_path):
            with pytest.raises(AssertionError, match=r"could not resolve"):
                assert_json_path({"menu": {}}, "menu.id", "file")

    Returns:
        A callable ``_assert(document, path, expected) -> None``. ``document``
        may be JSON text, an already-decoded value, or a ``Node``. The raw value
        at ``path`` is compared with ``expected`` using ``==``.
    """

    def _assert(document: Any, path: str, expected: Any) -> None:
        """Assert that ``path`` resolves inside ``document`` to ``expected``.

        Raises:
            AssertionError: When the path cannot be resolved, or resolves to a
                different value. The message includes the path and both values.
        """
        if isinstance(document, Node):
            root = document
        elif isinstance(document, str | bytes):
            root = Node.from_json(document)
        else:
            root = Node.wrap(document)

        try:
            actual = resolve(root, path).value()
        except NavigatorError as exc:
            raise AssertionError(f"could not resolve {path!r}: {exc}") from exc

        if actual != expected:
            raise AssertionError(
                f"value at {path!r} does not match\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}"
            )

    return _assert
