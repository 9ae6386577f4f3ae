"""
Tests for the runtime settings applier.
"""

import logging
import sys
from unittest.mock import Mock, patch

import pytest

from hearth.infrastructure.settings import RuntimeSettings


class TestRuntimeSettings:
    """Test cases for RuntimeSettings."""

    def test_nested_settings_flattened(self) -> None:
        settings = RuntimeSettings()

        with patch.object(settings, "set") as mock_set:
            settings.apply({"a": {"b": 1, "c": 2}})

        assert mock_set.call_count == 2
        assert sorted(call.args for call in mock_set.call_args_list) == [("a.b", 1), ("a.c", 2)]

    def test_deeply_nested(self) -> None:
        settings = RuntimeSettings()

        settings.apply({"x": {"y": {"z": "deep"}}, "top": True})

        assert settings.all() == {"x.y.z": "deep", "top": True}

    def test_non_scalar_values_skipped(self) -> None:
        settings = RuntimeSettings()

        settings.apply({"list": [1, 2], "none": None, "ok": 1.5})

        assert settings.all() == {"ok": 1.5}

    def test_prefix(self) -> None:
        settings = RuntimeSettings()

        settings.apply({"b": 1}, prefix="a.")

        assert settings.get("a.b") == 1

    def test_custom_handler(self) -> None:
        handler = Mock()
        settings = RuntimeSettings({"feature.flag": handler})

        settings.apply({"feature": {"flag": "on", "other": "x"}})

        handler.assert_called_once_with("on")
        assert settings.get("feature.other") == "x"

    def test_register_handler(self) -> None:
        handler = Mock()
        settings = RuntimeSettings()

        settings.register_handler("custom", handler)
        settings.set("custom", 3)

        handler.assert_called_once_with(3)

    def test_recursion_limit(self) -> None:
        original = sys.getrecursionlimit()
        settings = RuntimeSettings()

        try:
            settings.apply({"sys": {"recursionlimit": original + 100}})
            assert sys.getrecursionlimit() == original + 100
        finally:
            sys.setrecursionlimit(original)

    def test_logging_level(self) -> None:
        root = logging.getLogger()
        original = root.level
        settings = RuntimeSettings()

        try:
            settings.set("logging.level", "warning")
            assert root.level == logging.WARNING
        finally:
            root.setLevel(original)

    def test_invalid_value_propagates(self) -> None:
        settings = RuntimeSettings()

        with pytest.raises(ValueError):
            settings.set("sys.recursionlimit", "lots")
        assert settings.get("sys.recursionlimit") is None
