"""Normalization Pipeline — нормализация ориентации и масштаба загруженного ассета

Порядок нормализации:
1. Чтение bounding box от рендерера
2. Bounding box из нулей (или отсутствует) → SKIPPED, без вызовов рендерера
3. Orientation Detector → коррекция + эффективные габариты
4. Scale Calculator → равномерный масштаб в [scale_min, scale_max]
5. Применение: set_orientation, затем set_uniform_scale

State machine (на один экземпляр ассета):
- IDLE → MEASURING: сигнал load-complete от рендерера
- MEASURING → NORMALIZED: валидный bounding box, шаги 3-5 выполнены
- MEASURING → SKIPPED: bounding box из нулей
- NORMALIZED / SKIPPED терминальны; новая загрузка перезапускает с IDLE

Каждый load-complete увеличивает generation. Результат измерения
применяется только если его LoadToken принадлежит текущему generation;
результаты вытесненного ассета отбрасываются.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.config.settings import get_settings
from src.core.contracts.validators import validate_normalization_output
from src.core.domain.geometry import BoundingBox
from src.core.domain.outcome import (
    NormalizationResult,
    NormalizationStatus,
    NormalizationWarning,
)
from src.core.domain.target import TargetSpec
from src.normalizer.orientation import detect_orientation
from src.normalizer.renderer import RenderingCollaborator
from src.normalizer.scale_calculator import compute_scale

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    """Состояние пайплайна для текущего ассета."""

    IDLE = "IDLE"
    MEASURING = "MEASURING"
    NORMALIZED = "NORMALIZED"
    SKIPPED = "SKIPPED"


TERMINAL_STATES = frozenset({PipelineState.NORMALIZED, PipelineState.SKIPPED})


class PipelineStateError(RuntimeError):
    """Некорректное использование пайплайна (например, повторное измерение)."""


@dataclass(frozen=True)
class LoadToken:
    """Токен загрузки ассета: generation, к которому привязан результат."""

    generation: int


@dataclass(frozen=True)
class PipelineTransition:
    """Результат шага пайплайна."""

    new_state: PipelineState
    previous_state: PipelineState
    generation: int

    # True если ориентация и масштаб переданы рендереру
    applied: bool

    # Диагностика
    transition_reason: str
    result: Optional[NormalizationResult]

    # Для отладки
    details: str


# =============================================================================
# PURE CORE
# =============================================================================


def normalize_bounding_box(
    box: Optional[BoundingBox],
    target: TargetSpec,
) -> NormalizationResult:
    """Чистая нормализация: BoundingBox + TargetSpec → NormalizationResult.

    Неизмеримый ассет (None или все размеры нулевые) не является ошибкой:
    возвращается SKIPPED с предупреждением UNMEASURABLE_ASSET.

    Args:
        box: измеренный bounding box (None если рендерер не смог измерить)
        target: целевые размеры и границы clamp

    Returns:
        NormalizationResult
    """
    if box is None or box.is_unmeasurable():
        logger.warning("Could not read model dimensions. Skipping normalization.")
        return NormalizationResult(
            status=NormalizationStatus.SKIPPED,
            raw_dimensions=box,
            orientation=None,
            effective_dimensions=None,
            scale=None,
            warnings=(NormalizationWarning.UNMEASURABLE_ASSET,),
            details="Could not read model dimensions, normalization skipped",
        )

    logger.info(
        "Raw dimensions (m): %.4f %.4f %.4f", box.width, box.height, box.depth
    )

    warnings: tuple[NormalizationWarning, ...] = ()
    if box.is_degenerate():
        warnings = (NormalizationWarning.DEGENERATE_DIMENSION,)
        logger.warning(
            "Degenerate bounding box, zero axes: %s",
            ", ".join(axis.value for axis in box.zero_axes()),
        )

    detection = detect_orientation(box)
    effective = detection.effective
    logger.info("Orientation correction: %s %s %s", *detection.correction.as_tuple())
    logger.info(
        "Effective dimensions (m): %.4f %.4f %.4f, volume (m3): %.3e",
        effective.width,
        effective.height,
        effective.depth,
        effective.volume(),
    )

    scale = compute_scale(effective, target)
    logger.info(
        "Scale factors H: %.4f W: %.4f V: %.4f -> final: %.4f",
        scale.scale_by_height,
        scale.scale_by_width,
        scale.scale_by_volume,
        scale.value,
    )

    return NormalizationResult(
        status=NormalizationStatus.NORMALIZED,
        raw_dimensions=box,
        orientation=detection.correction,
        effective_dimensions=effective,
        scale=scale,
        warnings=warnings,
        details=f"{detection.details}, scale={scale.value:.6f}, clamped={scale.clamped}",
    )


# =============================================================================
# DRIVER
# =============================================================================


class NormalizationPipeline:
    """Драйвер нормализации, управляемый сигналами рендерера.

    Однопоточный: каждый load-complete запускает ровно один прогон.
    """

    def __init__(
        self,
        renderer: RenderingCollaborator,
        target: Optional[TargetSpec] = None,
    ):
        """
        Args:
            renderer: внешний рендерер
            target: целевые размеры (опционально, по умолчанию из
                NORMALIZER_* переменных окружения через get_settings)
        """
        self.renderer = renderer
        self.target = target or get_settings().to_target_spec()

        self._state = PipelineState.IDLE
        self._generation = 0
        self._last_result: Optional[NormalizationResult] = None

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def last_result(self) -> Optional[NormalizationResult]:
        return self._last_result

    def is_current(self, token: LoadToken) -> bool:
        return token.generation == self._generation

    def reset(self) -> None:
        """Новый ассет назначен рендереру: машина возвращается в IDLE.

        Generation увеличивается, поэтому ожидающие измерения
        прежнего ассета становятся устаревшими.
        """
        self._generation += 1
        self._move_to(PipelineState.IDLE, "reset")
        self._last_result = None

    def on_load_complete(self) -> LoadToken:
        """Сигнал load-complete: IDLE → MEASURING для нового generation."""
        self._generation += 1
        self._last_result = None
        self._move_to(PipelineState.IDLE, "new_load")
        self._move_to(PipelineState.MEASURING, "load_complete")
        logger.info("Model loaded, measuring (generation=%d)", self._generation)
        return LoadToken(generation=self._generation)

    def measure(self, token: LoadToken) -> PipelineTransition:
        """Чтение bounding box у рендерера и завершение измерения."""
        if not self.is_current(token):
            return self._stale_transition(token)

        return self.complete_measurement(token, self.renderer.get_bounding_box())

    def handle_load_complete(self) -> PipelineTransition:
        """on_load_complete + measure в одном синхронном прогоне."""
        return self.measure(self.on_load_complete())

    def complete_measurement(
        self,
        token: LoadToken,
        box: Optional[BoundingBox],
    ) -> PipelineTransition:
        """Завершение измерения для ассета с данным токеном.

        Args:
            token: токен, полученный из on_load_complete
            box: измеренный bounding box (None если измерение недоступно)

        Returns:
            PipelineTransition; для устаревшего токена applied=False и
            состояние не меняется

        Raises:
            PipelineStateError: если текущий ассет не в состоянии MEASURING
            jsonschema.ValidationError: если результат нарушает
                normalization_output.json (рендерер не вызывается)
        """
        if not self.is_current(token):
            return self._stale_transition(token)

        if self._state != PipelineState.MEASURING:
            raise PipelineStateError(
                f"cannot complete measurement in state {self._state.value} "
                f"(generation={self._generation})"
            )

        previous_state = self._state
        result = normalize_bounding_box(box, self.target)
        self._last_result = result

        if result.is_skipped:
            self._move_to(PipelineState.SKIPPED, "unmeasurable_asset")
            return PipelineTransition(
                new_state=PipelineState.SKIPPED,
                previous_state=previous_state,
                generation=token.generation,
                applied=False,
                transition_reason="unmeasurable_asset",
                result=result,
                details=result.details,
            )

        # Выходной контракт проверяется до любых вызовов рендерера
        validate_normalization_output(result.to_output_payload())

        # Один и тот же масштаб по всем трём осям
        self.renderer.set_orientation(*result.orientation.as_tuple())
        self.renderer.set_uniform_scale(result.scale.value)
        self._move_to(PipelineState.NORMALIZED, "normalized")
        logger.info("Normalization complete. Scale applied: %.6f", result.scale.value)

        return PipelineTransition(
            new_state=PipelineState.NORMALIZED,
            previous_state=previous_state,
            generation=token.generation,
            applied=True,
            transition_reason="normalized",
            result=result,
            details=result.details,
        )

    def _stale_transition(self, token: LoadToken) -> PipelineTransition:
        logger.info(
            "Discarding measurement for superseded generation %d (current=%d)",
            token.generation,
            self._generation,
        )
        return PipelineTransition(
            new_state=self._state,
            previous_state=self._state,
            generation=token.generation,
            applied=False,
            transition_reason="stale_generation",
            result=None,
            details=f"Superseded by generation {self._generation}",
        )

    def _move_to(self, new_state: PipelineState, reason: str) -> None:
        if new_state != self._state:
            logger.debug(
                "Pipeline %s -> %s (%s, generation=%d)",
                self._state.value,
                new_state.value,
                reason,
                self._generation,
            )
        self._state = new_state
