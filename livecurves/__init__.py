"""
Livecurves is a library of composable curves for live coding: functions from a position in [0, 1] to a control value,
for driving amplitude, cutoff, pitch and the like over time. Contents of this package include the `primitives` module
(waves, ramps, eases and noise), the `data` module (curves built from sequences of numbers), the `breakpoints` module,
which defines the multi-segment :class:`~livecurves.breakpoints.Breakpoints` envelope, the `combinators` module for
chaining, mixing and sampling curves, and the `presets` module, with ADSR envelopes and LFOs.
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

from .errors import LivecurvesError, CurveDomainError
from .position import clamp, calc_pos, calc_pos_linear, pos_to_radians, normalize
from .parameter import Parameter, ScalarParameter, CurveParameter, resolve, apply_amp_bias
from .curve import Curve, FunctionCurve, ArithmeticCurve, as_curve
from .primitives import Const, Noise, Ramp, Saw, Triangle, Sine, Pulse, EaseIn, EaseOut, EaseInOut, EaseOutIn, \
    Curvature, const, noise, ramp, saw, triangle, sine, pulse, ease_in, ease_out, ease_in_out, ease_out_in, curvature
from .data import Timeseries, Sequencer, timeseries, sequencer
from .breakpoints import Breakpoint, BreakpointSegment, Breakpoints, breakpoints
from .combinators import Chain, Mix, chain, mix, to_array
from .presets import Lfo, adsr, lfo

logging.getLogger("livecurves").addHandler(logging.NullHandler())
