"""
Parameters are the knobs of a curve (rate, phase, amp, bias, width, ...). Each one is either a fixed number or
itself a curve, in which case it is evaluated at whatever position the curve being configured asks about. This module
defines the two kinds of parameter, the function that resolves them, and the amplitude/bias step that every
primitive applies last.
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

from typing import Callable, TypeVar


T = TypeVar('T', bound='Parameter')


class Parameter:

    """
    Base class for the two kinds of parameter: :class:`ScalarParameter` and :class:`CurveParameter`. Use
    :func:`Parameter.wrap` to get the right kind for a given value.
    """

    @classmethod
    def wrap(cls, value) -> T:
        """
        Turns a plain value into a Parameter. Parameters are returned as is, anything callable becomes a
        :class:`CurveParameter`, and everything else a :class:`ScalarParameter`.

        :param value: a number, a curve (or any function of one position), or an existing Parameter
        """
        if isinstance(value, Parameter):
            return value
        if callable(value):
            return CurveParameter(value)
        return ScalarParameter(value)

    def resolve(self, position: float):
        """
        Get the value of this parameter at the given position.
        """
        raise NotImplementedError()

    @property
    def raw(self):
        """
        The number or curve this parameter was built from.
        """
        raise NotImplementedError()

    def __eq__(self, other):
        return type(self) is type(other) and self.raw == other.raw

    def __hash__(self):
        return hash((type(self), self.raw))


class ScalarParameter(Parameter):

    """
    A parameter with a fixed value, whatever the position.

    :param value: the value
    """

    def __init__(self, value):
        self._value = value

    def resolve(self, position: float):
        return self._value

    @property
    def raw(self):
        return self._value

    def __repr__(self):
        return repr(self._value)


class CurveParameter(Parameter):

    """
    A parameter whose value is read off a curve at the position being evaluated.

    :param curve: a curve, or any function from position to value
    """

    def __init__(self, curve: Callable[[float], float]):
        self._curve = curve

    def resolve(self, position: float):
        return self._curve(position)

    @property
    def raw(self):
        return self._curve

    def __repr__(self):
        return repr(self._curve)


def resolve(param, position: float):
    """
    Resolves a parameter, given either as a :class:`Parameter` or as a raw number or curve, at the given position.

    :param param: the parameter
    :param position: where to evaluate it if it is a curve
    """
    return Parameter.wrap(param).resolve(position)


def apply_amp_bias(value: float, amp, bias, position: float = None) -> float:
    """
    Scales and then offsets a value: ``value * amp + bias``. This is the last step of every primitive curve.

    :param value: the value to scale
    :param amp: scalar or curve parameter for the scaling factor
    :param bias: scalar or curve parameter for the offset
    :param position: where to evaluate amp and bias if they are curves. If None, the value itself is used.
    """
    p = value if position is None else position
    return value * resolve(amp, p) + resolve(bias, p)
