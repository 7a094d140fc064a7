"""
Precision — ширина floating-point для угловых типов

Degrees и Radians параметризованы шириной числа (single / double precision).
Precision описывает набор возможностей такой ширины:
- numpy dtype для арифметики
- machine epsilon
- константа π той же точности
- приведение произвольного числа к этой ширине

Вся арифметика F32-углов выполняется в numpy.float32, результат хранится как
обычный Python float (точно представимый в float32).
"""

from enum import Enum
from typing import Final

import numpy as np


class Precision(str, Enum):
    """Ширина floating-point значения угла"""

    F32 = "f32"
    F64 = "f64"

    @property
    def dtype(self) -> type[np.floating]:
        """numpy scalar type для арифметики"""
        return np.float32 if self is Precision.F32 else np.float64

    @property
    def epsilon(self) -> float:
        """Machine epsilon данной ширины"""
        return float(np.finfo(self.dtype).eps)

    @property
    def pi(self) -> np.floating:
        """π, округлённое до данной ширины"""
        return self.dtype(np.pi)

    def cast(self, value: float) -> np.floating:
        """
        Приведение числа к данной ширине.

        Args:
            value: Любое значение, принимаемое numpy scalar конструктором

        Returns:
            numpy scalar (float32 или float64)
        """
        with np.errstate(over="ignore"):
            return self.dtype(value)

    def round(self, value: float) -> float:
        """Округление до данной ширины с возвратом Python float"""
        return float(self.cast(value))

    def scale(self, value: float, numerator: float, denominator: float) -> float:
        """
        value * (numerator / denominator), вычисленное в данной ширине.

        Переполнение даёт IEEE-результат (inf) без предупреждений numpy.

        Args:
            value: Масштабируемое значение
            numerator: Числитель множителя
            denominator: Знаменатель множителя

        Returns:
            Результат как Python float
        """
        with np.errstate(over="ignore", invalid="ignore"):
            factor = self.cast(numerator) / self.cast(denominator)
            return float(self.cast(value) * factor)

    def distance(self, lhs: float, rhs: float) -> float:
        """abs(lhs - rhs) в данной ширине (NaN для inf - inf)"""
        with np.errstate(over="ignore", invalid="ignore"):
            return float(abs(self.cast(lhs) - self.cast(rhs)))

    def shortest_repr(self, value: float) -> str:
        """
        Кратчайшая десятичная запись, однозначно восстанавливающая значение
        в данной ширине, без экспоненты и без хвостового ".0".
        NaN печатается как "NaN", бесконечности как "inf" / "-inf".

        Examples:
            >>> Precision.F64.shortest_repr(45.0)
            '45'
            >>> Precision.F32.shortest_repr(0.7853981852531433)
            '0.7853982'
            >>> Precision.F64.shortest_repr(float("nan"))
            'NaN'
        """
        if np.isnan(value):
            return "NaN"
        return np.format_float_positional(self.cast(value), trim="-")

    def coarser(self, other: "Precision") -> "Precision":
        """Более грубая из двух ширин (F32, если хотя бы одна из них F32)"""
        if Precision.F32 in (self, other):
            return Precision.F32
        return Precision.F64

    @classmethod
    def of(cls, value: object) -> "Precision":
        """
        Определение ширины по типу голого числа.

        numpy.float32 (и более узкие numpy float) → F32, всё остальное → F64.
        """
        if isinstance(value, np.floating) and np.finfo(type(value)).bits <= 32:
            return cls.F32
        return DEFAULT_PRECISION


DEFAULT_PRECISION: Final[Precision] = Precision.F64
