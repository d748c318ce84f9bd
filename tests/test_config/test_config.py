from __future__ import annotations

import pytest

from objtasks.config import ObjtasksConfig


class TestObjtasksConfig:
    def test_default_values(self) -> None:
        cfg = ObjtasksConfig()
        assert cfg.log_level == "WARNING"
        assert cfg.json_indent is None
        assert cfg.json_sort_keys is False

    def test_custom_values(self) -> None:
        cfg = ObjtasksConfig(log_level="DEBUG", json_indent=2, json_sort_keys=True)
        assert cfg.log_level == "DEBUG"
        assert cfg.json_indent == 2
        assert cfg.json_sort_keys is True

    def test_frozen_immutability(self) -> None:
        cfg = ObjtasksConfig()
        with pytest.raises(AttributeError):
            cfg.log_level = "INFO"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ObjtasksConfig() == ObjtasksConfig()
        assert ObjtasksConfig(json_indent=2) != ObjtasksConfig(json_indent=4)
