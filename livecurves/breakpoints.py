r"""
Module containing the :class:`Breakpoints` curve, a multi-segment envelope built from (time, value, shape) points.
Times and values are normalized to [0, 1] when the envelope is built, and each segment is bent by the shaping curve of
the breakpoint it ends on. The :class:`BreakpointSegment`\ s that make up the envelope are also defined here.
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

import bisect
import logging
import numbers
from typing import Callable, NamedTuple, Sequence, Tuple, TypeVar, Union

from .curve import Curve
from .primitives import Ramp, Curvature


_LOGGER = logging.getLogger("livecurves.breakpoints")

T = TypeVar('T', bound='Breakpoints')


class Breakpoint(NamedTuple):

    """
    A single point of a :class:`Breakpoints` envelope.

    :param time: where the point sits in time (any units; the envelope normalizes them)
    :param value: the level at that time (ditto)
    :param shape: the curve that shapes the segment arriving at this point. None means linear.
    """

    time: float
    value: float
    shape: Union[Callable[[float], float], float, None] = None


class BreakpointSegment:

    """
    A segment of a :class:`Breakpoints` envelope, running from one (normalized) breakpoint to the next.

    :param start_time: the start time of the segment
    :param end_time: the end time of the segment
    :param start_level: the level at the start of the segment
    :param end_level: the level at the end of the segment
    :param shape: curve mapping progress through the segment (0 to 1) to progress between the levels
    """

    def __init__(self, start_time: float, end_time: float, start_level: float, end_level: float,
                 shape: Callable[[float], float]):
        self.start_time = start_time
        self.end_time = end_time
        self.start_level = start_level
        self.end_level = end_level
        self.shape = shape

    @property
    def duration(self) -> float:
        """
        Duration of this segment.
        """
        return self.end_time - self.start_time

    def value_at(self, t: float) -> float:
        """
        Get the interpolated value of the segment at time t. The fraction of the way through the segment is passed
        through the shaping curve before interpolating between the start and end levels.

        :param t: time at which to evaluate the level (relative to the envelope, not to the start of this segment)
        """
        if self.duration == 0:
            # a zero-length segment is an instantaneous jump; report where it jumps from
            return self.start_level
        segment_pos = (t - self.start_time) / self.duration
        return self.start_level + self.shape(segment_pos) * (self.end_level - self.start_level)

    def __contains__(self, t):
        return self.start_time <= t < self.end_time or t == self.start_time

    def __eq__(self, other):
        return isinstance(other, BreakpointSegment) and self.start_time == other.start_time \
               and self.end_time == other.end_time and self.start_level == other.start_level \
               and self.end_level == other.end_level and self.shape == other.shape

    def __repr__(self):
        return "BreakpointSegment({}, {}, {}, {}, {!r})".format(self.start_time, self.end_time, self.start_level,
                                                                self.end_level, self.shape)


class Breakpoints(Curve):

    r"""
    An envelope defined by breakpoints. Times are rescaled so that the earliest maps to 0 and the latest to 1, and
    values are rescaled the same way, so the envelope always lives in the unit square.

    Evaluating at position p finds the first breakpoint whose time exceeds p. Before (or at) the first breakpoint
    we get the first value, at or after the last breakpoint we get the last value, and in between we interpolate
    across the segment ending at that breakpoint, using that breakpoint's shape. Breakpoints are used in the order
    given; they are not sorted, and out-of-order times simply produce whatever the search above yields.

    :param points: sequence of :class:`Breakpoint`\ s, or of (time, value) / (time, value, shape) tuples. A shape
        may be a curve or any function of one variable, a number (interpreted as a :class:`~livecurves.primitives
        .Curvature`), or None for a linear segment. With no points at all, the envelope is a constant 0.
    """

    def __init__(self, points: Sequence = ()):
        self._original_points = tuple(Breakpoints._coerce_point(point) for point in points)
        self._points = Breakpoints._normalize_points(self._original_points)
        self._times = tuple(point.time for point in self._points)
        self._sorted = all(a <= b for a, b in zip(self._times[:-1], self._times[1:]))
        self.segments = tuple(
            BreakpointSegment(start.time, end.time, start.value, end.value, end.shape)
            for start, end in zip(self._points[:-1], self._points[1:])
        )
        if len(self._points) > 0:
            _LOGGER.debug("Built envelope with %d breakpoints (%s order)", len(self._points),
                          "ascending" if self._sorted else "unsorted")

    @staticmethod
    def _coerce_point(point) -> Breakpoint:
        if isinstance(point, Breakpoint):
            return point
        if not hasattr(point, "__len__") or len(point) < 2:
            raise ValueError("Each breakpoint needs at least a time and a value, not {!r}".format(point))
        return Breakpoint(point[0], point[1], point[2] if len(point) > 2 else None)

    @staticmethod
    def _coerce_shape(shape) -> Callable[[float], float]:
        if shape is None:
            return Ramp()
        if callable(shape):
            return shape
        if isinstance(shape, numbers.Number):
            return Curvature(shape)
        raise TypeError("Breakpoint shape should be a curve, a number or None, not {!r}".format(shape))

    @staticmethod
    def _normalize_points(points: Sequence[Breakpoint]) -> Tuple[Breakpoint, ...]:
        if len(points) == 0:
            return ()
        times = [point.time for point in points]
        min_time = min(times)
        time_range = max(times) - min_time

        values = [point.value for point in points]
        min_value = min(values)
        value_range = max(values) - min_value
        if value_range == 0:
            value_range = 1.0

        return tuple(
            Breakpoint((point.time - min_time) / float(time_range) if time_range > 0 else 0,
                       (point.value - min_value) / float(value_range),
                       Breakpoints._coerce_shape(point.shape))
            for point in points
        )

    # ---------------------------- Class methods --------------------------------

    @classmethod
    def from_points(cls, *points) -> T:
        """
        Construct an envelope from points given as separate arguments.

        :param points: each of the form (time, value) or (time, value, shape)
        :return: a Breakpoints envelope constructed accordingly
        """
        return cls(points)

    # ---------------------------- Various Properties --------------------------------

    @property
    def points(self) -> Tuple[Breakpoint, ...]:
        """
        The breakpoints after normalization, with every shape filled in.
        """
        return self._points

    @property
    def original_points(self) -> Tuple[Breakpoint, ...]:
        """
        The breakpoints as given.
        """
        return self._original_points

    @property
    def times(self) -> Sequence[float]:
        """
        Tuple of the normalized breakpoint times.
        """
        return self._times

    @property
    def values(self) -> Sequence[float]:
        """
        Tuple of the normalized breakpoint values.
        """
        return tuple(point.value for point in self._points)

    @property
    def shapes(self) -> Sequence[Callable[[float], float]]:
        """
        Tuple of the shaping curves, one per breakpoint. (The first one never gets used, since no segment ends there.)
        """
        return tuple(point.shape for point in self._points)

    # ------------------------ Interpolation --------------------------

    def _index_of_first_point_after(self, position: float) -> int:
        if self._sorted:
            return bisect.bisect_right(self._times, position)
        for i, t in enumerate(self._times):
            if t > position:
                return i
        return len(self._times)

    def value_at(self, position: float):
        if len(self._points) == 0:
            return 0
        index = self._index_of_first_point_after(position)
        if index == 0:
            return self._points[0].value
        if index >= len(self._points):
            return self._points[-1].value
        return self.segments[index - 1].value_at(position)

    def _config(self) -> dict:
        return {"points": self._original_points}

    def __repr__(self):
        return "Breakpoints({!r})".format(list(self._original_points))


def breakpoints(*points) -> Breakpoints:
    """
    Multi-segment envelope from (time, value) or (time, value, shape) points, e.g.
    ``breakpoints((0, 0), (0.2, 1, ease_in()), (0.7, 0.3, ease_out()), (1, 0))``. See :class:`Breakpoints`.
    """
    return Breakpoints(points)
