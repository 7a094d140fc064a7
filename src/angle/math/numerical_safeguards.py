"""
Numerical Safeguards — приближённые сравнения float

Модуль содержит epsilon-параметры и общий helper приближённого равенства,
не зависящий от угловых типов:
- EPS_F32 / EPS_F64: machine epsilon single / double precision
- inexact_eq: сравнение двух чисел в double precision с допуском EPS_F64

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN никогда не считается приближённо равным чему-либо (включая себя)
2. Допуск абсолютный и строгий (<), без относительной составляющей
3. NaN/Inf не перехватываются: семантика IEEE-754 сохраняется
"""

from typing import Final, SupportsFloat

import numpy as np

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Machine epsilon для single precision (2**-23)
EPS_F32: Final[float] = float(np.finfo(np.float32).eps)

# Machine epsilon для double precision (2**-52)
EPS_F64: Final[float] = float(np.finfo(np.float64).eps)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def inexact_eq(lhs: SupportsFloat, rhs: SupportsFloat) -> bool:
    """
    Приближённое равенство двух чисел в double precision.

    Оба операнда расширяются до float64 независимо от исходной точности
    (float32 значения расширяются без потерь), затем:

        abs(lhs - rhs) < EPS_F64

    Допуск абсолютный, поэтому сравнение надёжно только для значений
    умеренной величины.

    Args:
        lhs: Первое значение (float, int, numpy scalar, ...)
        rhs: Второе значение

    Returns:
        True если значения отличаются меньше чем на EPS_F64

    Examples:
        >>> inexact_eq(1.0, 1.0)
        True
        >>> inexact_eq(0.1 + 0.2, 0.3)
        True
        >>> inexact_eq(1.0, 1.0 + 1e-9)
        False
        >>> inexact_eq(float("nan"), float("nan"))
        False
    """
    return abs(float(lhs) - float(rhs)) < EPS_F64
