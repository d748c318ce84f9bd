from __future__ import annotations

import pytest

from objtasks.errors import InvalidDimensionError, ObjtasksError
from objtasks.shapes import Rectangle, rectangle


class TestRectangle:
    def test_dimensions(self) -> None:
        r = rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self) -> None:
        r = rectangle(10, 20)
        assert r.area == 200
        assert r.get_area() == 200

    def test_float_area(self) -> None:
        assert rectangle(2.5, 4).area == pytest.approx(10.0)

    def test_frozen(self) -> None:
        r = rectangle(1, 2)
        with pytest.raises(AttributeError):
            r.width = 5  # type: ignore[misc]

    def test_equality(self) -> None:
        assert rectangle(3, 4) == Rectangle(width=3, height=4)


class TestRectangleValidation:
    @pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-1, 5), (5, -0.5)])
    def test_non_positive(self, width, height) -> None:
        with pytest.raises(InvalidDimensionError, match="positive"):
            rectangle(width, height)

    def test_nan_rejected(self) -> None:
        with pytest.raises(InvalidDimensionError):
            rectangle(float("nan"), 1)

    @pytest.mark.parametrize("value", ["10", None, True])
    def test_non_numeric(self, value) -> None:
        with pytest.raises(InvalidDimensionError, match="must be a number"):
            rectangle(value, 1)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            rectangle(-1, 1)
        with pytest.raises(ObjtasksError):
            rectangle(-1, 1)
