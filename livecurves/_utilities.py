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
import threading

from .errors import CurveDomainError


_thread_state = threading.local()


def _thread_rng() -> random.Random:
    """
    Returns the random generator belonging to the calling thread, creating (and seeding from system entropy) a new
    one the first time a thread asks for it. This keeps concurrent noise curves from sharing generator state.
    """
    rng = getattr(_thread_state, "rng", None)
    if rng is None:
        rng = _thread_state.rng = random.Random()
    return rng


def _power(base, exponent):
    """
    Real-valued power. Zero to a negative power and results too large for a float give infinity, as float
    arithmetic does elsewhere; only a result that would be complex raises :class:`CurveDomainError`.
    """
    if base == 0 and exponent < 0:
        return math.inf
    try:
        return math.pow(base, exponent)
    except OverflowError:
        # only odd integer powers keep a negative sign
        return -math.inf if base < 0 and exponent % 2 == 1 else math.inf
    except ValueError:
        raise CurveDomainError("Cannot raise {} to the power of {} and stay within the real numbers."
                               .format(base, exponent))


def _triangular(low, high, mode=None, rng: random.Random = None):
    """
    Draws from a triangular distribution between low and high. Note that mode is a fraction of the way from low to
    high (0.5 by default), not an absolute value.

    :param low: lower bound
    :param high: upper bound
    :param mode: where the apex sits, as a fraction in [0, 1]
    :param rng: the generator to draw from (the calling thread's generator if None)
    """
    r = (rng or _thread_rng()).random()
    if mode is None:
        mode = 0.5
    if r > mode:
        # mirror the draw so that the same square-root formula covers the falling side
        r = 1.0 - r
        mode = 1.0 - mode
        low, high = high, low
    return low + (high - low) * math.sqrt(r * mode)
