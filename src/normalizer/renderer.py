"""Renderer boundary — интерфейс рендерера и адаптер атрибутов model-viewer

Рендерер — внешний чёрный ящик: после загрузки ассета отдаёт измеренный
bounding box и принимает ориентацию (три угла) и единый масштаб.

ModelViewerAdapter сериализует типизированный выход в строковые атрибуты:
- orientation: "Xdeg Ydeg Zdeg" (euler)
- scale: "s s s" (одинаковое значение по трём осям, 6 знаков)
"""

import logging
from typing import Any, Mapping, Optional, Protocol

from src.core.contracts.validators import BoundingBoxValidator
from src.core.domain.geometry import BoundingBox

logger = logging.getLogger(__name__)

ORIENTATION_ATTRIBUTE = "orientation"
SCALE_ATTRIBUTE = "scale"


class RenderingCollaborator(Protocol):
    """Внешний рендерер, к которому применяется нормализация."""

    def get_bounding_box(self) -> Optional[BoundingBox]:
        ...

    def set_orientation(self, x_deg: float, y_deg: float, z_deg: float) -> None:
        ...

    def set_uniform_scale(self, factor: float) -> None:
        ...


class ModelViewerElement(Protocol):
    """Элемент viewer-а с API на строковых атрибутах."""

    def get_dimensions(self) -> Optional[Mapping[str, Any]]:
        ...

    def set_attribute(self, name: str, value: str) -> None:
        ...


def format_orientation_attribute(x_deg: float, y_deg: float, z_deg: float) -> str:
    """
    Examples:
        >>> format_orientation_attribute(-90.0, 0.0, 0.0)
        '-90deg 0deg 0deg'
    """
    return f"{x_deg:g}deg {y_deg:g}deg {z_deg:g}deg"


def format_scale_attribute(factor: float) -> str:
    """
    Examples:
        >>> format_scale_attribute(0.4)
        '0.400000 0.400000 0.400000'
    """
    s = f"{factor:.6f}"
    return f"{s} {s} {s}"


class ModelViewerAdapter:
    """Адаптер RenderingCollaborator поверх элемента с атрибутами.

    Измерение {x, y, z} проверяется по контракту bounding_box.json перед
    построением BoundingBox. Отсутствующее измерение (None) возвращается
    как None и трактуется пайплайном как неизмеримый ассет.
    """

    def __init__(self, element: ModelViewerElement):
        self.element = element
        self._validator = BoundingBoxValidator()

    def get_bounding_box(self) -> Optional[BoundingBox]:
        dimensions = self.element.get_dimensions()
        if dimensions is None:
            return None

        payload = dict(dimensions)
        self._validator.validate(payload)
        return BoundingBox.from_xyz(payload)

    def set_orientation(self, x_deg: float, y_deg: float, z_deg: float) -> None:
        value = format_orientation_attribute(x_deg, y_deg, z_deg)
        logger.debug("set %s=%r", ORIENTATION_ATTRIBUTE, value)
        self.element.set_attribute(ORIENTATION_ATTRIBUTE, value)

    def set_uniform_scale(self, factor: float) -> None:
        value = format_scale_attribute(factor)
        logger.debug("set %s=%r", SCALE_ATTRIBUTE, value)
        self.element.set_attribute(SCALE_ATTRIBUTE, value)
