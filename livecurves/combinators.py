"""
Ways of building curves out of other curves: :class:`Chain` feeds each curve's output into the next, :class:`Mix`
blends curves by weight, and :func:`to_array` samples a curve into a list.
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

import numbers
from functools import reduce
from typing import Callable, List, Sequence

from .curve import Curve, as_curve


class Chain(Curve):

    """
    Function composition: the position goes into the first curve, its output is used as the position for the second
    curve, and so on. ``Chain([f, g])(p) == g(f(p))``. With no curves, the position is returned unchanged.

    :param curves: the curves (or functions of one variable) to compose, in order of application
    """

    def __init__(self, curves: Sequence):
        self._curves = tuple(as_curve(curve) for curve in curves)

    @property
    def curves(self) -> Sequence[Curve]:
        return self._curves

    def value_at(self, position: float):
        return reduce(lambda value, curve: curve.value_at(value), self._curves, position)

    def _config(self) -> dict:
        return {"curves": self._curves}


class Mix(Curve):

    """
    Weighted blend of several curves, each evaluated at the same position. The weights are normalized to sum to 1.

    :param curves: the curves (or functions of one variable) to mix
    :param weights: one weight per curve, or None to weigh them all equally
    """

    def __init__(self, curves: Sequence, weights: Sequence[float] = None):
        self._curves = tuple(as_curve(curve) for curve in curves)
        if weights is None or len(weights) == 0:
            weights = [1.0] * len(self._curves)
        for weight in weights:
            if not isinstance(weight, numbers.Real):
                raise ValueError("Mix weights must be numbers, not {!r}".format(weight))
        if len(weights) != len(self._curves):
            raise ValueError("Mix needs one weight per curve (got {} curves and {} weights)."
                             .format(len(self._curves), len(weights)))
        total_weight = float(sum(weights))
        if len(self._curves) > 0 and total_weight == 0:
            raise ValueError("Mix weights must not sum to zero.")
        self._weights = tuple(weights)
        self._normalized_weights = tuple(w / total_weight for w in weights)

    @property
    def curves(self) -> Sequence[Curve]:
        return self._curves

    @property
    def weights(self) -> Sequence[float]:
        """
        The weights after normalization.
        """
        return self._normalized_weights

    def value_at(self, position: float):
        return sum(curve.value_at(position) * weight for curve, weight in zip(self._curves, self._normalized_weights))

    def _config(self) -> dict:
        return {"curves": self._curves, "weights": self._weights}


def chain(*curves) -> Chain:
    """
    Compose curves, feeding each output into the next as its position. See :class:`Chain`.
    """
    return Chain(curves)


def mix(*curves_and_weights) -> Mix:
    """
    Blend curves by weight. Arguments alternate between curves and weights, e.g. ``mix(sine(), 0.5, noise(), 0.2)``.
    If every argument is a curve (or function), they are all mixed equally: ``mix(sine(), noise())``. See
    :class:`Mix`.
    """
    if all(callable(arg) for arg in curves_and_weights):
        return Mix(curves_and_weights)
    curves = curves_and_weights[0::2]
    weights = curves_and_weights[1::2]
    return Mix(curves, weights)


def to_array(curve: Callable[[float], float], num_samples: int, map_func: Callable = None) -> List:
    """
    Samples a curve at ``num_samples`` evenly spaced positions, ``i / num_samples`` for i from 0 to num_samples - 1.
    Note that the position 1 itself is never sampled.

    :param curve: the curve (or any function of one variable) to sample
    :param num_samples: how many samples to take
    :param map_func: optional function applied to each sample
    :return: a list of the samples
    """
    if num_samples < 0:
        raise ValueError("Cannot take a negative number of samples.")
    samples = []
    for i in range(num_samples):
        sample = curve(float(i) / num_samples)
        samples.append(map_func(sample) if map_func is not None else sample)
    return samples
