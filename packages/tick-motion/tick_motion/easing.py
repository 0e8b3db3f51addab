"""Easing functions for tween interpolation.

Every curve has the signature ``f(t, b, c, d) -> float`` where ``t`` is the
elapsed time, ``b`` the begin value, ``c`` the change (``end - begin``) and
``d`` the duration. Curves are pure and defined for ``0 <= t <= d``.
"""
from __future__ import annotations

import math

from tick_motion.types import EasingFunction

_BACK_S = 1.70158


def _out_in(
    out_fn: EasingFunction, in_fn: EasingFunction, t: float, b: float, c: float, d: float
) -> float:
    # First half runs the out-curve, second half the in-curve, each over c/2.
    if t < d / 2:
        return out_fn(t * 2, b, c / 2, d)
    return in_fn(t * 2 - d, b + c / 2, c / 2, d)


def linear(t: float, b: float, c: float, d: float) -> float:
    return c * t / d + b


# -- quadratic --


def in_quad(t: float, b: float, c: float, d: float) -> float:
    return c * (t / d) ** 2 + b


def out_quad(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * t * (t - 2) + b


def in_out_quad(t: float, b: float, c: float, d: float) -> float:
    t = t / d * 2
    if t < 1:
        return c / 2 * t ** 2 + b
    return -c / 2 * ((t - 1) * (t - 3) - 1) + b


def out_in_quad(t: float, b: float, c: float, d: float) -> float:
    return _out_in(out_quad, in_quad, t, b, c, d)


# -- cubic --


def in_cubic(t: float, b: float, c: float, d: float) -> float:
    return c * (t / d) ** 3 + b


def out_cubic(t: float, b: float, c: float, d: float) -> float:
    return c * ((t / d - 1) ** 3 + 1) + b


def in_out_cubic(t: float, b: float, c: float, d: float) -> float:
    t = t / d * 2
    if t < 1:
        return c / 2 * t * t * t + b
    t -= 2
    return c / 2 * (t * t * t + 2) + b


def out_in_cubic(t: float, b: float, c: float, d: float) -> float:
    return _out_in(out_cubic, in_cubic, t, b, c, d)


# -- quartic --


def in_quart(t: float, b: float, c: float, d: float) -> float:
    return c * (t / d) ** 4 + b


def out_quart(t: float, b: float, c: float, d: float) -> float:
    return -c * ((t / d - 1) ** 4 - 1) + b


def in_out_quart(t: float, b: float, c: float, d: float) -> float:
    t = t / d * 2
    if t < 1:
        return c / 2 * t ** 4 + b
    return -c / 2 * ((t - 2) ** 4 - 2) + b


def out_in_quart(t: float, b: float, c: float, d: float) -> float:
    return _out_in(out_quart, in_quart, t, b, c, d)


# -- quintic --


def in_quint(t: float, b: float, c: float, d: float) -> float:
    return c * (t / d) ** 5 + b


def out_quint(t: float, b: float, c: float, d: float) -> float:
    return c * ((t / d - 1) ** 5 + 1) + b


def in_out_quint(t: float, b: float, c: float, d: float) -> float:
    t = t / d * 2
    if t < 1:
        return c / 2 * t ** 5 + b
    return c / 2 * ((t - 2) ** 5 + 2) + b


def out_in_quint(t: float, b: float, c: float, d: float) -> float:
    return _out_in(out_quint, in_quint, t, b, c, d)


# -- sinusoidal --


def in_sine(t: float, b: float, c: float, d: float) -> float:
    return -c * math.cos(t / d * (math.pi / 2)) + c + b


def out_sine(t: float, b: float, c: float, d: float) -> float:
    return c * math.sin(t / d * (math.pi / 2)) + b


def in_out_sine(t: float, b: float, c: float, d: float) -> float:
    return -c / 2 * (math.cos(math.pi * t / d) - 1) + b


def out_in_sine(t: float, b: float, c: float, d: float) -> float:
    return _out_in(out_sine, in_sine, t, b, c, d)


# -- exponential --
# 2**-10 is not quite zero, so the curves are nudged by ~0.001 * c to land
# on the begin value. in_expo therefore ends at b + 0.999 * c.


def in_expo(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    return c * 2 ** (10 * (t / d - 1)) + b - c * 0.001


def out_expo(t: float, b: float, c: float, d: float) -> float:
    if t == d:
        return b + c
    return c * 1.001 * (-(2 ** (-10 * t / d)) + 1) + b


def in_out_expo(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    if t == d:
        return b + c
    t = t / d * 2
    if t < 1:
        return c / 2 * 2 ** (10 * (t - 1)) + b - c * 0.0005
    return c / 2 * 1.0005 * (-(2 ** (-10 * (t - 1))) + 2) + b


def out_in_expo(t: float, b: float, c: float, d: float) -> float:
    return _out_in(out_expo, in_expo, t, b, c, d)


# -- circular --


def in_circ(t: float, b: float, c: float, d: float) -> float:
    return -c * (math.sqrt(1 - (t / d) ** 2) - 1) + b


def out_circ(t: float, b: float, c: float, d: float) -> float:
    return c * math.sqrt(1 - (t / d - 1) ** 2) + b


def in_out_circ(t: float, b: float, c: float, d: float) -> float:
    t = t / d * 2
    if t < 1:
        return -c / 2 * (math.sqrt(1 - t * t) - 1) + b
    t -= 2
    return c / 2 * (math.sqrt(1 - t * t) + 1) + b


def out_in_circ(t: float, b: float, c: float, d: float) -> float:
    return _out_in(out_circ, in_circ, t, b, c, d)


# -- elastic --


def _elastic_params(c: float, d: float) -> tuple[float, float, float]:
    """Return (period, amplitude, shift) for the elastic curves."""
    period = d * 0.3
    return period, c, period / 4


def in_elastic(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    t /= d
    if t == 1:
        return b + c
    p, a, s = _elastic_params(c, d)
    t -= 1
    return -(a * 2 ** (10 * t) * math.sin((t * d - s) * (2 * math.pi) / p)) + b


def out_elastic(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    t /= d
    if t == 1:
        return b + c
    p, a, s = _elastic_params(c, d)
    return a * 2 ** (-10 * t) * math.sin((t * d - s) * (2 * math.pi) / p) + c + b


def in_out_elastic(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    t = t / d * 2
    if t == 2:
        return b + c
    p, a, s = _elastic_params(c, d)
    t -= 1
    if t < 0:
        return -0.5 * (a * 2 ** (10 * t) * math.sin((t * d - s) * (2 * math.pi) / p)) + b
    return a * 2 ** (-10 * t) * math.sin((t * d - s) * (2 * math.pi) / p) * 0.5 + c + b


def out_in_elastic(t: float, b: float, c: float, d: float) -> float:
    return _out_in(out_elastic, in_elastic, t, b, c, d)


# -- back --


def in_back(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * ((_BACK_S + 1) * t - _BACK_S) + b


def out_back(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * (t * t * ((_BACK_S + 1) * t + _BACK_S) + 1) + b


def in_out_back(t: float, b: float, c: float, d: float) -> float:
    s = _BACK_S * 1.525
    t = t / d * 2
    if t < 1:
        return c / 2 * (t * t * ((s + 1) * t - s)) + b
    t -= 2
    return c / 2 * (t * t * ((s + 1) * t + s) + 2) + b


def out_in_back(t: float, b: float, c: float, d: float) -> float:
    return _out_in(out_back, in_back, t, b, c, d)


# -- bounce --


def out_bounce(t: float, b: float, c: float, d: float) -> float:
    t /= d
    if t < 1 / 2.75:
        return c * (7.5625 * t * t) + b
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return c * (7.5625 * t * t + 0.75) + b
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return c * (7.5625 * t * t + 0.9375) + b
    t -= 2.625 / 2.75
    return c * (7.5625 * t * t + 0.984375) + b


def in_bounce(t: float, b: float, c: float, d: float) -> float:
    return c - out_bounce(d - t, 0, c, d) + b


def in_out_bounce(t: float, b: float, c: float, d: float) -> float:
    if t < d / 2:
        return in_bounce(t * 2, 0, c, d) * 0.5 + b
    return out_bounce(t * 2 - d, 0, c, d) * 0.5 + c * 0.5 + b


def out_in_bounce(t: float, b: float, c: float, d: float) -> float:
    return _out_in(out_bounce, in_bounce, t, b, c, d)


EASINGS: dict[str, EasingFunction] = {
    "linear": linear,
    "in_quad": in_quad,
    "out_quad": out_quad,
    "in_out_quad": in_out_quad,
    "out_in_quad": out_in_quad,
    "in_cubic": in_cubic,
    "out_cubic": out_cubic,
    "in_out_cubic": in_out_cubic,
    "out_in_cubic": out_in_cubic,
    "in_quart": in_quart,
    "out_quart": out_quart,
    "in_out_quart": in_out_quart,
    "out_in_quart": out_in_quart,
    "in_quint": in_quint,
    "out_quint": out_quint,
    "in_out_quint": in_out_quint,
    "out_in_quint": out_in_quint,
    "in_sine": in_sine,
    "out_sine": out_sine,
    "in_out_sine": in_out_sine,
    "out_in_sine": out_in_sine,
    "in_expo": in_expo,
    "out_expo": out_expo,
    "in_out_expo": in_out_expo,
    "out_in_expo": out_in_expo,
    "in_circ": in_circ,
    "out_circ": out_circ,
    "in_out_circ": in_out_circ,
    "out_in_circ": out_in_circ,
    "in_elastic": in_elastic,
    "out_elastic": out_elastic,
    "in_out_elastic": in_out_elastic,
    "out_in_elastic": out_in_elastic,
    "in_back": in_back,
    "out_back": out_back,
    "in_out_back": in_out_back,
    "out_in_back": out_in_back,
    "in_bounce": in_bounce,
    "out_bounce": out_bounce,
    "in_out_bounce": in_out_bounce,
    "out_in_bounce": out_in_bounce,
}
