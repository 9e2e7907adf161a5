"""Normalizer — коррекция ориентации и равномерный масштаб загруженной 3D-модели.

- Orientation Detector: наибольшая ось → вертикаль Y
- Scale Calculator: uniform scale под целевые высоту/ширину/объём
- Pipeline Driver: state machine IDLE → MEASURING → NORMALIZED/SKIPPED
"""

from .orientation import (
    OrientationDetection,
    detect_orientation,
    is_depth_tallest,
    is_width_tallest,
)
from .pipeline import (
    LoadToken,
    NormalizationPipeline,
    PipelineState,
    PipelineStateError,
    PipelineTransition,
    normalize_bounding_box,
)
from .renderer import (
    ModelViewerAdapter,
    RenderingCollaborator,
    format_orientation_attribute,
    format_scale_attribute,
)
from .scale_calculator import compute_scale, volume_scale

__all__ = [
    # Orientation
    "OrientationDetection",
    "detect_orientation",
    "is_depth_tallest",
    "is_width_tallest",
    # Scale
    "compute_scale",
    "volume_scale",
    # Pipeline
    "LoadToken",
    "NormalizationPipeline",
    "PipelineState",
    "PipelineStateError",
    "PipelineTransition",
    "normalize_bounding_box",
    # Renderer boundary
    "ModelViewerAdapter",
    "RenderingCollaborator",
    "format_orientation_attribute",
    "format_scale_attribute",
]
