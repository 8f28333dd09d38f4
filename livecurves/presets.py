"""
Ready-made curves for the most common jobs: an attack/decay/sustain/release envelope and a low frequency oscillator.
Both are assembled entirely out of the other parts of the library.
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

import logging
import random
from typing import Callable, Union

from .breakpoints import Breakpoints
from .curve import Curve
from .primitives import pulse, ramp, sine, ease_in, ease_out, triangle, saw, noise


_LOGGER = logging.getLogger("livecurves.presets")

#: names accepted for the ``shape`` of :func:`adsr`, and the curves they stand for
ADSR_SHAPES = {
    "step": pulse,
    "linear": ramp,
    "sine": sine,
    "exponential": ease_in,
    "logarithmic": ease_out,
}

#: names accepted for the ``shape`` of :func:`lfo`
LFO_SHAPES = ("sine", "triangle", "saw", "pulse", "noise")


def _adsr_shape_curve(shape) -> Callable[[float], float]:
    if callable(shape):
        return shape
    if shape not in ADSR_SHAPES:
        _LOGGER.warning("Unknown ADSR shape %r; falling back to 'linear'", shape)
        shape = "linear"
    return ADSR_SHAPES[shape]()


def adsr(attack: float = 0.01, decay: float = 0.1, sustain: float = 0.7, release: float = 0.2,
         sustain_level: float = 0.8, shape: Union[str, Callable[[float], float]] = "linear") -> Breakpoints:
    """
    Construct a standard attack/decay/sustain/release envelope over the unit interval. The four durations are taken
    as proportions of the whole.

    :param attack: rise time, from 0 to the peak of 1
    :param decay: time taken to fall from the peak to the sustain level
    :param sustain: time spent at the sustain level
    :param release: time taken to fall from the sustain level to 0
    :param sustain_level: level held during the sustain portion
    :param shape: the shape of the attack, decay and release segments; one of "step", "linear", "sine",
        "exponential" or "logarithmic", or a curve. (The sustain segment is always linear.)
    :return: a :class:`~livecurves.breakpoints.Breakpoints` envelope constructed accordingly
    """
    total = attack + decay + sustain + release
    if total == 0:
        raise ValueError("ADSR durations must not all be zero.")
    a_norm = attack / total
    d_norm = decay / total
    s_norm = sustain / total
    shape_curve = _adsr_shape_curve(shape)

    return Breakpoints([
        (0, 0),
        (a_norm, 1, shape_curve),
        (a_norm + d_norm, sustain_level, shape_curve),
        (a_norm + d_norm + s_norm, sustain_level),
        (1, 0, shape_curve),
    ])


class Lfo(Curve):

    """
    Low frequency oscillator: one of the unipolar primitive waves, recentred around ``offset`` so that its output
    swings ``depth / 2`` either side of it.

    :param shape: "sine", "triangle", "saw", "pulse" or "noise". Anything else falls back to "sine".
    :param rate: how many cycles over the unit interval
    :param depth: peak-to-peak size of the swing
    :param offset: the centre value
    :param rng: random generator for the "noise" shape (see :class:`~livecurves.primitives.Noise`)
    """

    def __init__(self, shape: str = "sine", rate=1, depth: float = 1, offset: float = 0,
                 rng: random.Random = None):
        if shape not in LFO_SHAPES:
            _LOGGER.warning("Unknown LFO shape %r; falling back to 'sine'", shape)
            shape = "sine"
        self._shape = shape
        self._rate = rate
        self._depth = depth
        self._offset = offset
        if shape == "noise":
            self._wave = noise(rate=rate, rng=rng)
        else:
            self._wave = {"sine": sine, "triangle": triangle, "saw": saw, "pulse": pulse}[shape](rate=rate)

    @property
    def wave(self) -> Curve:
        """
        The underlying unipolar primitive.
        """
        return self._wave

    def value_at(self, position: float):
        return (self._wave.value_at(position) - 0.5) * self._depth + self._offset

    def _config(self) -> dict:
        return {"shape": self._shape, "rate": self._rate, "depth": self._depth, "offset": self._offset}


def lfo(shape: str = "sine", rate=1, depth: float = 1, offset: float = 0, rng: random.Random = None) -> Lfo:
    """
    Low frequency oscillator centred on offset (see :class:`Lfo`).
    """
    return Lfo(shape=shape, rate=rate, depth=depth, offset=offset, rng=rng)
