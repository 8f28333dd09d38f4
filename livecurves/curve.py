r"""
Module containing the :class:`Curve` base class. A Curve is an immutable function from a position (normally in the
range [0, 1]) to a control value. :class:`Curve`\ s are callable, can be sampled into lists, plotted, and combined
arithmetically with numbers or with other curves.
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
import operator
from typing import Callable, Tuple, List, TypeVar


T = TypeVar('T', bound='Curve')


class Curve:

    """
    Base class for all curves. Subclasses implement :func:`Curve.value_at`, and ``_config``, which returns the
    configuration the curve was built with.
    """

    def value_at(self, position: float):
        """
        Get the value of this curve at the given position.

        :param position: the position, normally within [0, 1]
        """
        raise NotImplementedError()

    def __call__(self, position: float):
        return self.value_at(position)

    def _config(self) -> dict:
        return {}

    @property
    def config(self) -> dict:
        """
        Dictionary of the configuration this curve was constructed with (a fresh copy each time).
        """
        return dict(self._config())

    # -------------------------------- Sampling and plotting --------------------------------

    def to_array(self, num_samples: int, map_func: Callable = None) -> List:
        """
        Samples this curve at ``num_samples`` evenly spaced positions from 0 (inclusive) to 1 (exclusive).

        :param num_samples: how many samples to take
        :param map_func: optional function applied to each sample
        """
        from .combinators import to_array
        return to_array(self, num_samples, map_func=map_func)

    def _get_graphable_point_pairs(self, resolution: int = 100) -> Tuple[List[float], List]:
        x_values = [x / resolution for x in range(resolution + 1)]
        y_values = [self.value_at(x) for x in x_values]
        return x_values, y_values

    def show_plot(self, title: str = None, resolution: int = 100) -> None:
        """
        Uses matplotlib to display a graph of this Curve over the interval [0, 1].

        :param title: (optional) the title to give the graph
        :param resolution: how many points to use in creating the graph
        """
        try:
            import matplotlib.pyplot as plt
        except ImportError:
            raise ImportError("Could not find matplotlib, which is needed for plotting.")
        fig, ax = plt.subplots()
        ax.plot(*self._get_graphable_point_pairs(resolution))
        ax.set_title('Graph of {}'.format(type(self).__name__) if title is None else title)
        plt.show()

    # -------------------------------- Arithmetic --------------------------------

    def __add__(self, other):
        return ArithmeticCurve(self, other, operator.add)

    def __radd__(self, other):
        return ArithmeticCurve(other, self, operator.add)

    def __sub__(self, other):
        return ArithmeticCurve(self, other, operator.sub)

    def __rsub__(self, other):
        return ArithmeticCurve(other, self, operator.sub)

    def __mul__(self, other):
        return ArithmeticCurve(self, other, operator.mul)

    def __rmul__(self, other):
        return ArithmeticCurve(other, self, operator.mul)

    def __truediv__(self, other):
        return ArithmeticCurve(self, other, operator.truediv)

    def __rtruediv__(self, other):
        return ArithmeticCurve(other, self, operator.truediv)

    def __neg__(self):
        return ArithmeticCurve(self, -1, operator.mul)

    def __repr__(self):
        return "{}({})".format(type(self).__name__,
                               ", ".join("{}={!r}".format(key, value) for key, value in self._config().items()))


class FunctionCurve(Curve):

    """
    Wraps an arbitrary function of one variable so that it behaves like any other curve.

    :param function: a function from position to value (often a lambda function)
    """

    def __init__(self, function: Callable[[float], float]):
        if not callable(function):
            raise TypeError("FunctionCurve needs a callable, not {!r}".format(function))
        self._function = function

    @property
    def function(self) -> Callable[[float], float]:
        return self._function

    def value_at(self, position: float):
        return self._function(position)

    def _config(self) -> dict:
        return {"function": self._function}


class ArithmeticCurve(Curve):

    """
    The result of combining two operands with an arithmetic operator. Both operands are evaluated at the same
    position; numeric operands are treated as constants.

    :param left: left operand (a curve, a function of one variable, or a number)
    :param right: right operand (ditto)
    :param operation: a binary function, e.g. ``operator.add``
    """

    _symbols = {operator.add: "+", operator.sub: "-", operator.mul: "*", operator.truediv: "/"}

    def __init__(self, left, right, operation: Callable):
        self._left = as_curve(left)
        self._right = as_curve(right)
        self._operation = operation

    def value_at(self, position: float):
        return self._operation(self._left.value_at(position), self._right.value_at(position))

    def _config(self) -> dict:
        return {"left": self._left, "right": self._right, "operation": self._operation}

    def __repr__(self):
        return "({!r} {} {!r})".format(self._left, self._symbols.get(self._operation, "?"), self._right)


def as_curve(value) -> Curve:
    """
    Coerces a value into a :class:`Curve`. Curves are returned unchanged, other callables are wrapped in a
    :class:`FunctionCurve`, and numbers become a :class:`~livecurves.primitives.Const`.

    :param value: a curve, a function of one variable, or a number
    """
    if isinstance(value, Curve):
        return value
    if callable(value):
        return FunctionCurve(value)
    if isinstance(value, numbers.Number):
        from .primitives import Const
        return Const(value)
    raise TypeError("Cannot make a curve out of {!r}".format(value))
