"""
Position arithmetic shared by every curve: clamping into the unit interval, rate and phase modulation (with a
periodic or a linear wrapping policy), conversion to radians, and min-max normalization of sample sequences.
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
from typing import Sequence, List

from .parameter import resolve


def clamp(x: float) -> float:
    """
    Bounds x to the interval [0, 1].
    """
    return min(max(x, 0.0), 1.0)


def calc_pos(pos: float, rate=1, phase=0) -> float:
    """
    Applies rate and phase modulation to a position, wrapping the result into [0, 1). Used by periodic curves
    (sine, triangle, pulse, noise), for which a position of 1 is the same as a position of 0.

    Note the order of evaluation: a rate curve sees the clamped position, whereas a phase curve sees the position
    after it has been scaled by the rate.

    :param pos: the incoming position (clamped to [0, 1] before use)
    :param rate: scalar or curve; how many times the shape repeats over the unit interval
    :param phase: scalar or curve; offset added after the rate scaling
    """
    pos = clamp(pos)
    pos *= resolve(rate, pos)
    return (pos + resolve(phase, pos)) % 1.0


def calc_pos_linear(pos: float, rate=1, phase=0) -> float:
    """
    Same as :func:`calc_pos`, except that an unmodulated position of exactly 1 is left as 1 rather than wrapping
    to 0. This lets one-shot shapes (ramps, saws, eases) actually reach their final value.

    :param pos: the incoming position (clamped to [0, 1] before use)
    :param rate: scalar or curve; how many times the shape repeats over the unit interval
    :param phase: scalar or curve; offset added after the rate scaling
    """
    pos = clamp(pos)
    r = resolve(rate, pos)
    scaled_pos = pos * r
    p = resolve(phase, scaled_pos)
    if pos == 1.0 and r == 1 and p == 0:
        return 1.0
    return (scaled_pos + p) % 1.0


def pos_to_radians(pos: float) -> float:
    """
    Converts a position in [0, 1] to an angle in [0, 2π].
    """
    return clamp(pos) * 2 * math.pi


def normalize(values: Sequence[float]) -> List[float]:
    """
    Min-max scales a sequence of numbers to the range [0, 1]. If every value is the same there is no range to
    scale by, and every value becomes 0.5.

    :param values: the numbers to normalize
    :return: a new list of normalized values (empty if values is empty)
    """
    if len(values) == 0:
        return []
    low, high = min(values), max(values)
    value_range = high - low
    if value_range == 0:
        return [0.5] * len(values)
    return [(v - low) / float(value_range) for v in values]
