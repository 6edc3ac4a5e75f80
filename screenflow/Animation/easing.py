"""
Easing curves used by tweens.
"""

import math
from enum import Enum
from typing import Callable, Dict


class Ease(Enum):
    LINEAR = "linear"
    IN_QUAD = "in_quad"
    OUT_QUAD = "out_quad"
    IN_OUT_QUAD = "in_out_quad"
    OUT_CUBIC = "out_cubic"
    OUT_CIRC = "out_circ"
    OUT_BACK = "out_back"
    OUT_BOUNCE = "out_bounce"
    IN_OUT_BOUNCE = "in_out_bounce"

    @classmethod
    def parse(cls, value) -> "Ease":
        """Accept an ``Ease`` or its config name (case insensitive)."""
        if isinstance(value, Ease):
            return value
        return cls(str(value).strip().lower())


def _out_back(t: float) -> float:
    c1 = 1.70158
    c3 = c1 + 1
    return 1 + c3 * (t - 1) ** 3 + c1 * (t - 1) ** 2


def _out_bounce(t: float) -> float:
    n1, d1 = 7.5625, 2.75
    if t < 1 / d1:
        return n1 * t * t
    if t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    if t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


def _in_out_bounce(t: float) -> float:
    if t < 0.5:
        return (1 - _out_bounce(1 - 2 * t)) / 2
    return (1 + _out_bounce(2 * t - 1)) / 2


_CURVES: Dict[Ease, Callable[[float], float]] = {
    Ease.LINEAR: lambda t: t,
    Ease.IN_QUAD: lambda t: t * t,
    Ease.OUT_QUAD: lambda t: 1 - (1 - t) * (1 - t),
    Ease.IN_OUT_QUAD: lambda t: 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2,
    Ease.OUT_CUBIC: lambda t: 1 - (1 - t) ** 3,
    Ease.OUT_CIRC: lambda t: math.sqrt(1 - (t - 1) ** 2),
    Ease.OUT_BACK: _out_back,
    Ease.OUT_BOUNCE: _out_bounce,
    Ease.IN_OUT_BOUNCE: _in_out_bounce,
}


def evaluate(ease: Ease, t: float) -> float:
    """Map linear progress ``t`` in [0, 1] through ``ease``."""
    t = min(1.0, max(0.0, t))
    return _CURVES[ease](t)
