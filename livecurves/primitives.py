"""
The primitive curves: constants, noise, ramps and saws, triangle/sine/pulse waves, eases, and exponential curvature.
Each is a small immutable class, paired with a lowercase factory function of the same name.

All primitives share a modulation contract. The incoming position is first scaled by ``rate`` and offset by ``phase``
(wrapping periodically, or linearly for the one-shot shapes, see :mod:`livecurves.position`), a base value in [0, 1]
is computed from it, and that value is finally scaled by ``amp`` and offset by ``bias``. Any of these parameters can be
a number or another curve.
"""

#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #
#  This file is part of livecurves (composable modulation curves and envelopes in Python)        #
#  Copyright 2026 the livecurves authors.                                                        #
#                                                                                                #
#  This program is free software: you can redistribute it and/or modify it under the terms of    #
#  the GNU General Public License as published by the Free Software Foundation, either version   #
#  3 of the License, or (at your option) any later version.                                      #
#                                                                                                #
#  This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY;     #
#  without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.     #
#  See the GNU General Public License for more details.                                          #
#                                                                                                #
#  You should have received a copy of the GNU General Public License along with this program.    #
#  If not, see <http://www.gnu.org/licenses/>.                                                   #
#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #

import math
import random

from ._utilities import _power, _triangular, _thread_rng
from .curve import Curve
from .parameter import Parameter, apply_amp_bias
from .position import calc_pos, calc_pos_linear, clamp, pos_to_radians


class Primitive(Curve):

    """
    Base class for primitive curves, holding the shared modulation parameters.

    :param amp: scales the base value
    :param rate: how many times the shape repeats over the unit interval
    :param phase: offset added to the (rate-scaled) position
    :param bias: added to the scaled value
    """

    #: whether the modulated position wraps periodically (True) or preserves a terminal 1.0 (False)
    periodic = True

    def __init__(self, amp=1, rate=1, phase=0, bias=0):
        self._amp = Parameter.wrap(amp)
        self._rate = Parameter.wrap(rate)
        self._phase = Parameter.wrap(phase)
        self._bias = Parameter.wrap(bias)

    def _modulate(self, position: float) -> float:
        if self.periodic:
            return calc_pos(position, self._rate, self._phase)
        return calc_pos_linear(position, self._rate, self._phase)

    def _base_value(self, pos: float) -> float:
        raise NotImplementedError()

    def value_at(self, position: float):
        pos = self._modulate(position)
        return apply_amp_bias(self._base_value(pos), self._amp, self._bias, pos)

    def _config(self) -> dict:
        return {"amp": self._amp.raw, "rate": self._rate.raw, "phase": self._phase.raw, "bias": self._bias.raw}


class Const(Primitive):

    """
    A constant value. By default no modulation happens at all: the value (or, if it is a curve, its value at the
    incoming position) is returned as is.

    :param value: the value to return
    :param mod: if True, modulate the position periodically and apply amp and bias like any other primitive
    """

    def __init__(self, value=1, mod: bool = False, amp=1, rate=1, phase=0, bias=0):
        super().__init__(amp=amp, rate=rate, phase=phase, bias=bias)
        self._value = Parameter.wrap(value)
        self._mod = mod

    def value_at(self, position: float):
        if not self._mod:
            return self._value.resolve(position)
        pos = self._modulate(position)
        return apply_amp_bias(self._value.resolve(pos), self._amp, self._bias, pos)

    def _config(self) -> dict:
        return dict(value=self._value.raw, mod=self._mod, **super()._config())


class Noise(Primitive):

    """
    Random values between low and high, drawn afresh on every call. With a mode, the draw is triangular and biased
    towards the mode (given as a fraction of the way from low to high); otherwise it is uniform.

    :param low: lower bound
    :param high: upper bound
    :param mode: apex of the triangular distribution, or None for a uniform one
    :param rng: a :class:`random.Random` to draw from. By default each thread uses its own unseeded generator.
    """

    def __init__(self, low=0, high=1, mode=None, amp=1, rate=1, phase=0, bias=0, rng: random.Random = None):
        super().__init__(amp=amp, rate=rate, phase=phase, bias=bias)
        self._low = Parameter.wrap(low)
        self._high = Parameter.wrap(high)
        self._mode = None if mode is None else Parameter.wrap(mode)
        self._rng = rng

    def _base_value(self, pos: float) -> float:
        low = self._low.resolve(pos)
        high = self._high.resolve(pos)
        rng = self._rng or _thread_rng()
        if self._mode is not None:
            return _triangular(low, high, self._mode.resolve(pos), rng)
        return rng.uniform(low, high)

    def _config(self) -> dict:
        return dict(low=self._low.raw, high=self._high.raw, mode=None if self._mode is None else self._mode.raw,
                    rng=self._rng, **super()._config())


class Ramp(Primitive):

    """
    Linear ramp from 0 to 1. Amp and bias curves are evaluated at the ramp's own value.
    """

    periodic = False

    def value_at(self, position: float):
        pos = self._modulate(position)
        return apply_amp_bias(pos, self._amp, self._bias)


class Saw(Primitive):

    """
    Falling sawtooth from 1 to 0. Amp and bias curves are evaluated at the saw's own value.
    """

    periodic = False

    def value_at(self, position: float):
        pos = self._modulate(position)
        return apply_amp_bias(1 - pos, self._amp, self._bias)


class Triangle(Primitive):

    """
    Triangle wave rising from 0 to 1 and back to 0.

    :param symmetry: where the peak sits within the cycle (clamped to [0, 1]). A symmetry of 0 gives a falling ramp
        and a symmetry of 1 a rising one.
    """

    def __init__(self, symmetry=0.5, amp=1, rate=1, phase=0, bias=0):
        super().__init__(amp=amp, rate=rate, phase=phase, bias=bias)
        self._symmetry = Parameter.wrap(symmetry)

    def _base_value(self, pos: float) -> float:
        sym = clamp(self._symmetry.resolve(pos))
        if sym <= 0:
            return 1.0 - pos
        if sym >= 1:
            return pos
        if pos < sym:
            return pos / sym
        return 1.0 - (pos - sym) / (1.0 - sym)

    def _config(self) -> dict:
        return dict(symmetry=self._symmetry.raw, **super()._config())


class Sine(Primitive):

    """
    Unipolar sine wave: starts at 0.5, peaks at 1 a quarter of the way through the cycle and bottoms out at 0
    three quarters of the way through.
    """

    def _base_value(self, pos: float) -> float:
        return math.sin(pos_to_radians(pos)) * 0.5 + 0.5


class Pulse(Primitive):

    """
    Pulse (square) wave: 0 for the first part of the cycle, then 1.

    :param width: the point in the cycle (clamped to [0, 1]) at which the pulse switches on
    """

    def __init__(self, width=0.5, amp=1, rate=1, phase=0, bias=0):
        super().__init__(amp=amp, rate=rate, phase=phase, bias=bias)
        self._width = Parameter.wrap(width)

    def _base_value(self, pos: float) -> float:
        return 0.0 if pos < clamp(self._width.resolve(pos)) else 1.0

    def _config(self) -> dict:
        return dict(width=self._width.raw, **super()._config())


class _Ease(Primitive):

    periodic = False
    default_exp = 3

    def __init__(self, exp=None, amp=1, rate=1, phase=0, bias=0):
        super().__init__(amp=amp, rate=rate, phase=phase, bias=bias)
        self._exp = Parameter.wrap(self.default_exp if exp is None else exp)

    def _config(self) -> dict:
        return dict(exp=self._exp.raw, **super()._config())


class EaseIn(_Ease):

    """
    Starts slow and speeds up: ``pos ** exp``.

    :param exp: the exponent (2 by default)
    """

    default_exp = 2

    def _base_value(self, pos: float) -> float:
        return _power(pos, self._exp.resolve(pos))


class EaseOut(_Ease):

    """
    Starts fast and slows down: ``1 - (1 - pos) ** exp``.

    :param exp: the exponent (3 by default)
    """

    def _base_value(self, pos: float) -> float:
        return 1 - _power(1 - pos, self._exp.resolve(pos))


class EaseInOut(_Ease):

    """
    S-curve: slow, fast, then slow again.

    :param exp: the exponent (3 by default). Non-integer exponents cannot be used past the halfway point, where the
        base of the power goes negative; evaluating there raises :class:`~livecurves.errors.CurveDomainError`.
    """

    def _base_value(self, pos: float) -> float:
        e = self._exp.resolve(pos)
        value = pos * 2
        if value < 1:
            return 0.5 * _power(value, e)
        value -= 2
        return 0.5 * (_power(value, e) + 2)


class EaseOutIn(_Ease):

    """
    Inverse S-curve: fast, slow, then fast again.

    :param exp: the exponent (3 by default). As with :class:`EaseInOut`, non-integer exponents only work where the
        base of the power is non-negative (here, the second half).
    """

    def _base_value(self, pos: float) -> float:
        e = self._exp.resolve(pos)
        value = pos * 2 - 1
        if value < 1:
            return 0.5 * _power(value, e) + 0.5
        return 1.0 - (0.5 * _power(value, e) + 0.5)


class Curvature(Primitive):

    """
    Exponential curve from 0 to 1 with a tunable bend, ``(e^(S*pos) - 1) / (e^S - 1)``, in the manner of a
    SuperCollider ``Env`` curve. Used for numeric breakpoint shapes.

    :param shape: the curvature S. 0 is linear, > 0 changes late, < 0 changes early.
    """

    periodic = False

    def __init__(self, shape=0, amp=1, rate=1, phase=0, bias=0):
        super().__init__(amp=amp, rate=rate, phase=phase, bias=bias)
        self._shape = Parameter.wrap(shape)

    def _base_value(self, pos: float) -> float:
        shape = self._shape.resolve(pos)
        if abs(shape) < 0.000001:
            # the exponential formula breaks down as S approaches zero, where it is linear anyway
            return pos
        return (math.exp(shape * pos) - 1) / (math.exp(shape) - 1)

    def _config(self) -> dict:
        return dict(shape=self._shape.raw, **super()._config())


# ---------------------------------------- factory functions ----------------------------------------


def const(value=1, mod: bool = False, amp=1, rate=1, phase=0, bias=0) -> Const:
    """Constant value (see :class:`Const`)."""
    return Const(value=value, mod=mod, amp=amp, rate=rate, phase=phase, bias=bias)


def noise(low=0, high=1, mode=None, amp=1, rate=1, phase=0, bias=0, rng: random.Random = None) -> Noise:
    """Uniform or triangular random values (see :class:`Noise`)."""
    return Noise(low=low, high=high, mode=mode, amp=amp, rate=rate, phase=phase, bias=bias, rng=rng)


def ramp(amp=1, rate=1, phase=0, bias=0) -> Ramp:
    """Linear ramp from 0 to 1."""
    return Ramp(amp=amp, rate=rate, phase=phase, bias=bias)


def saw(amp=1, rate=1, phase=0, bias=0) -> Saw:
    """Sawtooth from 1 to 0."""
    return Saw(amp=amp, rate=rate, phase=phase, bias=bias)


def triangle(symmetry=0.5, amp=1, rate=1, phase=0, bias=0) -> Triangle:
    """Triangle wave with adjustable symmetry (see :class:`Triangle`)."""
    return Triangle(symmetry=symmetry, amp=amp, rate=rate, phase=phase, bias=bias)


def sine(amp=1, rate=1, phase=0, bias=0) -> Sine:
    """Unipolar sine wave."""
    return Sine(amp=amp, rate=rate, phase=phase, bias=bias)


def pulse(width=0.5, amp=1, rate=1, phase=0, bias=0) -> Pulse:
    """Pulse wave with adjustable width."""
    return Pulse(width=width, amp=amp, rate=rate, phase=phase, bias=bias)


def ease_in(exp=2, amp=1, rate=1, phase=0, bias=0) -> EaseIn:
    return EaseIn(exp=exp, amp=amp, rate=rate, phase=phase, bias=bias)


def ease_out(exp=3, amp=1, rate=1, phase=0, bias=0) -> EaseOut:
    return EaseOut(exp=exp, amp=amp, rate=rate, phase=phase, bias=bias)


def ease_in_out(exp=3, amp=1, rate=1, phase=0, bias=0) -> EaseInOut:
    return EaseInOut(exp=exp, amp=amp, rate=rate, phase=phase, bias=bias)


def ease_out_in(exp=3, amp=1, rate=1, phase=0, bias=0) -> EaseOutIn:
    return EaseOutIn(exp=exp, amp=amp, rate=rate, phase=phase, bias=bias)


def curvature(shape=0, amp=1, rate=1, phase=0, bias=0) -> Curvature:
    """Exponential curve with the given curvature (see :class:`Curvature`)."""
    return Curvature(shape=shape, amp=amp, rate=rate, phase=phase, bias=bias)
