"""
Angle Units — типизированные углы в градусах и радианах

Единственный допустимый способ перехода между единицами угла:
- Degrees (360 градусов = полный оборот)
- Radians (2π радиан = полный оборот)

ЗАПРЕЩЕНО смешивать единицы без явного конвертера из этого модуля.

Протокол конверсии:
    Функция, которой нужен угол в конкретной единице, принимает DegreesLike /
    RadiansLike и вызывает as_degrees / as_radians. Подходят три вида входа:
    1. Угол в другой единице → пересчёт по формуле
    2. Голое число → интерпретируется как уже заданное в нужной единице
    3. Угол в нужной единице → возвращается как есть

ФОРМУЛЫ:
    radians = degrees × (π / 180)
    degrees = radians × (180 / π)

Нормализация угла (в [0, 360) или [0, 2π)) не выполняется.
"""

import logging
import math
from abc import abstractmethod
from numbers import Real
from typing import Any, ClassVar, Final, Union

import numpy as np
from pydantic import BaseModel, StrictFloat, ValidationInfo, field_validator, model_validator

from src.angle.math.precision import Precision

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Половина оборота в градусах (π радиан)
DEGREES_PER_HALF_TURN: Final[float] = 180.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class AngleConversionError(TypeError):
    """
    Значение нельзя интерпретировать как угол.

    Возникает, когда в протокол конверсии передан не угол и не вещественное
    число (str, None, bool, произвольный объект).
    """

    pass


# =============================================================================
# ГОЛЫЕ ЧИСЛА
# =============================================================================


def _is_real(value: object) -> bool:
    """Вещественное число: int, float, Fraction, numpy floating (но не bool)"""
    return isinstance(value, Real) and not isinstance(value, (bool, np.bool_))


def _to_float(value: Real) -> float:
    """
    Расширение вещественного числа до Python float.

    Слишком большие int и Fraction переполняются в ±inf, как в IEEE-754.
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


# =============================================================================
# BASE ANGLE MODEL
# =============================================================================


class _Angle(BaseModel):
    """
    Общая часть Degrees и Radians: одно float-значение заданной ширины.

    Immutable модель (frozen=True). Значение не валидируется на диапазон,
    NaN и Inf допустимы и распространяются по правилам IEEE-754.
    Принимаются те же значения, что и в протоколе конверсии: строки и bool
    отклоняются.
    """

    precision: Precision
    value: StrictFloat

    model_config = {"frozen": True}

    unit: ClassVar[str] = "angle"

    def __init__(self, value: Any = None, /, **data: Any) -> None:
        if value is not None:
            data["value"] = value
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def infer_precision(cls, data: Any) -> Any:
        """Ширина по умолчанию берётся из типа значения (numpy.float32 → F32)"""
        if not isinstance(data, dict) or "value" not in data:
            return data

        data = dict(data)
        raw = data["value"]
        if not _is_real(raw):
            raise ValueError(f"{cls.unit} value must be a real number, got {type(raw).__name__}")
        if data.get("precision") is None:
            data["precision"] = Precision.of(raw)
        data["value"] = _to_float(raw)
        return data

    @field_validator("value")
    @classmethod
    def round_to_precision(cls, v: float, info: ValidationInfo) -> float:
        """Значение F32-угла хранится округлённым до float32"""
        precision = info.data.get("precision")
        if precision is None:
            return v
        return precision.round(v)

    @classmethod
    @abstractmethod
    def from_angle(cls, angle: "AngleLike", precision: Precision | str | None = None) -> Any:
        """Конверсия любого угла или голого числа в единицу данного класса"""

    def with_precision(self, precision: Precision | str | None) -> Any:
        """
        Тот же угол в другой ширине.

        Args:
            precision: Целевая ширина (None — без изменений)

        Returns:
            self, если ширина совпадает, иначе новый экземпляр

        Raises:
            ValueError: Если precision не является допустимой шириной
        """
        if precision is None:
            return self

        precision = Precision(precision)
        if precision is self.precision:
            return self

        logger.debug(
            "Recasting %s %r from %s to %s",
            self.unit,
            self.value,
            self.precision.value,
            precision.value,
        )
        return type(self)(self.value, precision=precision)

    def approx_eq(self, other: "AngleLike") -> bool:
        """
        Приближённое равенство с любым значением, конвертируемым в этот тип.

        Сравнение выполняется в более грубой из двух ширин (F32, если хотя бы
        один операнд F32): оба значения приводятся к ней, other пересчитывается
        в единицу self, затем:

            abs(self.value - other.value) < machine_epsilon(width)

        Для углов одной единицы результат не зависит от порядка операндов.
        Голое число имеет ширину своего типа (numpy.float32 → F32, иначе F64).

        Допуск абсолютный, поэтому сравнение надёжно только для углов
        умеренной величины. NaN никогда не равен ничему.

        Args:
            other: Угол любой единицы или голое число (в единице self)

        Returns:
            True если значения отличаются меньше чем на epsilon
        """
        other_precision = other.precision if isinstance(other, _Angle) else Precision.of(other)
        width = self.precision.coarser(other_precision)
        lhs = self.with_precision(width)
        rhs = type(self).from_angle(other, width)
        return width.distance(lhs.value, rhs.value) < width.epsilon

    def __str__(self) -> str:
        return f"({self.precision.shortest_repr(self.value)})"


# =============================================================================
# DEGREES
# =============================================================================


class Degrees(_Angle):
    """
    Угол в градусах.

    Examples:
        >>> str(Degrees(45.0))
        '(45)'
    """

    unit: ClassVar[str] = "degrees"

    @classmethod
    def from_angle(
        cls, angle: "DegreesLike", precision: Precision | str | None = None
    ) -> "Degrees":
        """Конверсия любого DegreesLike в Degrees (см. as_degrees)"""
        return as_degrees(angle, precision)

    def to_radians(self) -> float:
        """
        Значение угла в радианах.

        Вычисляется в ширине угла: value × (π / 180), π той же ширины.
        """
        return self.precision.scale(self.value, self.precision.pi, DEGREES_PER_HALF_TURN)

    def into_radians(self) -> "Radians":
        """Тот же угол как Radians той же ширины"""
        return Radians(self.to_radians(), precision=self.precision)


# =============================================================================
# RADIANS
# =============================================================================


class Radians(_Angle):
    """
    Угол в радианах.

    Examples:
        >>> str(Radians(1.5))
        '(1.5)'
    """

    unit: ClassVar[str] = "radians"

    @classmethod
    def from_angle(
        cls, angle: "RadiansLike", precision: Precision | str | None = None
    ) -> "Radians":
        """Конверсия любого RadiansLike в Radians (см. as_radians)"""
        return as_radians(angle, precision)

    def to_degrees(self) -> float:
        """
        Значение угла в градусах.

        Вычисляется в ширине угла: value × (180 / π), π той же ширины.
        """
        return self.precision.scale(self.value, DEGREES_PER_HALF_TURN, self.precision.pi)

    def into_degrees(self) -> Degrees:
        """Тот же угол как Degrees той же ширины"""
        return Degrees(self.to_degrees(), precision=self.precision)


AngleLike = Union[Degrees, Radians, float, np.floating]
DegreesLike = AngleLike
RadiansLike = AngleLike


# =============================================================================
# ПРОТОКОЛ КОНВЕРСИИ
# =============================================================================


def _bare_number(angle: object, unit: str) -> Real:
    """Проверка, что голое значение является вещественным числом"""
    if not _is_real(angle):
        raise AngleConversionError(
            f"Cannot interpret {type(angle).__name__} value {angle!r} as {unit}"
        )
    return angle


def as_degrees(angle: DegreesLike, precision: Precision | str | None = None) -> Degrees:
    """
    Конверсия любого DegreesLike в Degrees.

    Args:
        angle: Degrees (identity), Radians (пересчёт по формуле) или голое
            вещественное число (интерпретируется как градусы)
        precision: Целевая ширина; None — ширина входа (для голого числа
            numpy.float32 → F32, иначе F64)

    Returns:
        Degrees

    Raises:
        AngleConversionError: Если angle не угол и не вещественное число
        ValueError: Если precision не является допустимой шириной

    Examples:
        >>> as_degrees(90.0)
        Degrees(precision=<Precision.F64: 'f64'>, value=90.0)
        >>> as_degrees(Radians(0.0)).value
        0.0
    """
    if isinstance(angle, Degrees):
        return angle.with_precision(precision)

    if isinstance(angle, Radians):
        return angle.with_precision(precision).into_degrees()

    value = _bare_number(angle, "degrees")
    target = Precision(precision) if precision is not None else Precision.of(value)
    logger.debug("Interpreting bare number %r as degrees (%s)", value, target.value)
    return Degrees(_to_float(value), precision=target)


def as_radians(angle: RadiansLike, precision: Precision | str | None = None) -> Radians:
    """
    Конверсия любого RadiansLike в Radians.

    Args:
        angle: Radians (identity), Degrees (пересчёт по формуле) или голое
            вещественное число (интерпретируется как радианы)
        precision: Целевая ширина; None — ширина входа

    Returns:
        Radians

    Raises:
        AngleConversionError: Если angle не угол и не вещественное число
        ValueError: Если precision не является допустимой шириной
    """
    if isinstance(angle, Radians):
        return angle.with_precision(precision)

    if isinstance(angle, Degrees):
        return angle.with_precision(precision).into_radians()

    value = _bare_number(angle, "radians")
    target = Precision(precision) if precision is not None else Precision.of(value)
    logger.debug("Interpreting bare number %r as radians (%s)", value, target.value)
    return Radians(_to_float(value), precision=target)
