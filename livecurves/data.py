"""
Curves driven by literal sequences of numbers: :class:`Timeseries`, which interpolates smoothly through a normalized
copy of the data, and :class:`Sequencer`, which steps through the raw values.
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
import math
from typing import Sequence

from .curve import Curve
from .position import clamp, normalize


_LOGGER = logging.getLogger("livecurves.data")


class Timeseries(Curve):

    """
    Linearly interpolates through a sequence of values spread evenly over [0, 1]. The values are min-max normalized
    at construction, so the curve always spans [0, 1] unless all values are equal (in which case it sits at 0.5).
    An empty sequence produces a constant 0.5.

    :param values: the data points
    """

    def __init__(self, values: Sequence[float]):
        self._values = tuple(values)
        self._normalized = tuple(normalize(self._values))
        if len(self._values) > 0:
            _LOGGER.debug("Timeseries of %d values normalized from range [%s, %s]",
                          len(self._values), min(self._values), max(self._values))

    @property
    def values(self) -> Sequence[float]:
        """
        The values as given.
        """
        return self._values

    @property
    def normalized_values(self) -> Sequence[float]:
        """
        The values after normalization to [0, 1].
        """
        return self._normalized

    def value_at(self, position: float):
        if len(self._normalized) == 0:
            return 0.5
        if len(self._normalized) == 1:
            return self._normalized[0]
        last_index = len(self._normalized) - 1
        index_f = clamp(position) * last_index
        fractional_part = index_f % 1.0
        index_low = min(max(math.floor(index_f), 0), last_index)
        index_high = min(max(math.ceil(index_f), 0), last_index)
        return self._normalized[index_low] * (1.0 - fractional_part) + \
               self._normalized[index_high] * fractional_part

    def _config(self) -> dict:
        return {"values": self._values}


class Sequencer(Curve):

    """
    Cycles through a sequence of values. In step mode the position picks out one raw value (no normalization, no
    interpolation), wrapping around for positions outside [0, 1). In smooth mode this is just a :class:`Timeseries`.

    :param values: the values to step through
    :param smooth: if True, interpolate through the normalized values instead of stepping
    """

    def __init__(self, values: Sequence, smooth: bool = False):
        self._values = tuple(values)
        self._smooth = smooth
        if smooth:
            self._timeseries = Timeseries(self._values)
        elif len(self._values) == 0:
            raise ValueError("At least one value is needed for a stepped Sequencer.")
        else:
            self._timeseries = None

    @property
    def values(self) -> Sequence:
        return self._values

    @property
    def smooth(self) -> bool:
        return self._smooth

    def value_at(self, position: float):
        if self._smooth:
            return self._timeseries.value_at(position)
        index = math.floor(position * len(self._values)) % len(self._values)
        return self._values[index]

    def _config(self) -> dict:
        return {"values": self._values, "smooth": self._smooth}


def timeseries(values: Sequence[float]) -> Timeseries:
    """Smooth curve through the normalized values (see :class:`Timeseries`)."""
    return Timeseries(values)


def sequencer(values: Sequence, smooth: bool = False) -> Sequencer:
    """Stepped (or, with smooth=True, interpolated) walk through the values (see :class:`Sequencer`)."""
    return Sequencer(values, smooth=smooth)
