"""Тесты для ModelViewerAdapter и сериализации атрибутов.

Покрытие:
- Формат атрибутов orientation / scale
- Чтение и валидация измерения {x, y, z}
- Полный прогон пайплайна через адаптер
"""

import pytest
from jsonschema import ValidationError

from src.core.domain import BoundingBox
from src.normalizer import (
    ModelViewerAdapter,
    NormalizationPipeline,
    PipelineState,
    format_orientation_attribute,
    format_scale_attribute,
)


class FakeModelViewer:
    """Элемент viewer-а: размеры и строковые атрибуты."""

    def __init__(self, dimensions=None):
        self.dimensions = dimensions
        self.attributes = {}

    def get_dimensions(self):
        return self.dimensions

    def set_attribute(self, name, value):
        self.attributes[name] = value


# =============================================================================
# ATTRIBUTE FORMAT
# =============================================================================


class TestAttributeFormat:
    """Сериализация ориентации и масштаба."""

    @pytest.mark.parametrize(
        "angles, expected",
        [
            ((0.0, 0.0, 0.0), "0deg 0deg 0deg"),
            ((-90.0, 0.0, 0.0), "-90deg 0deg 0deg"),
            ((0.0, 0.0, 90.0), "0deg 0deg 90deg"),
        ],
    )
    def test_orientation(self, angles, expected):
        assert format_orientation_attribute(*angles) == expected

    def test_scale_six_decimals_on_three_axes(self):
        assert format_scale_attribute(0.4) == "0.400000 0.400000 0.400000"
        assert format_scale_attribute(2.0 / 3.0) == "0.666667 0.666667 0.666667"

    def test_scale_axes_identical(self):
        x, y, z = format_scale_attribute(0.123456789).split(" ")
        assert x == y == z == "0.123457"


# =============================================================================
# ADAPTER
# =============================================================================


class TestModelViewerAdapter:
    """Чтение измерения и запись атрибутов."""

    def test_get_bounding_box(self):
        adapter = ModelViewerAdapter(FakeModelViewer({"x": 0.12, "y": 0.03, "z": 0.05}))

        assert adapter.get_bounding_box() == BoundingBox(width=0.12, height=0.03, depth=0.05)

    def test_missing_dimensions(self):
        adapter = ModelViewerAdapter(FakeModelViewer(None))
        assert adapter.get_bounding_box() is None

    def test_invalid_dimensions_rejected(self):
        adapter = ModelViewerAdapter(FakeModelViewer({"x": -1.0, "y": 0.1, "z": 0.1}))

        with pytest.raises(ValidationError):
            adapter.get_bounding_box()

    def test_setters_write_attributes(self):
        element = FakeModelViewer()
        adapter = ModelViewerAdapter(element)

        adapter.set_orientation(-90.0, 0.0, 0.0)
        adapter.set_uniform_scale(0.8)

        assert element.attributes == {
            "orientation": "-90deg 0deg 0deg",
            "scale": "0.800000 0.800000 0.800000",
        }


# =============================================================================
# PIPELINE THROUGH ADAPTER
# =============================================================================


class TestPipelineWithAdapter:
    """End-to-end через адаптер атрибутов."""

    def test_depth_tallest(self):
        element = FakeModelViewer({"x": 0.04, "y": 0.02, "z": 0.10})
        pipeline = NormalizationPipeline(ModelViewerAdapter(element))

        pipeline.handle_load_complete()

        assert pipeline.state == PipelineState.NORMALIZED
        assert element.attributes["orientation"] == "-90deg 0deg 0deg"
        assert element.attributes["scale"] == "0.800000 0.800000 0.800000"

    def test_width_tallest(self):
        element = FakeModelViewer({"x": 0.12, "y": 0.03, "z": 0.05})
        pipeline = NormalizationPipeline(ModelViewerAdapter(element))

        pipeline.handle_load_complete()

        assert element.attributes["orientation"] == "0deg 0deg 90deg"
        assert element.attributes["scale"] == "0.666667 0.666667 0.666667"

    def test_unmeasurable_leaves_attributes_untouched(self):
        element = FakeModelViewer({"x": 0, "y": 0, "z": 0})
        pipeline = NormalizationPipeline(ModelViewerAdapter(element))

        pipeline.handle_load_complete()

        assert pipeline.state == PipelineState.SKIPPED
        assert element.attributes == {}
