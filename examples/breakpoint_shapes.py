"""
livecurves Example: Breakpoint Shapes

Builds a filter-sweep envelope whose segments are bent by different shaping curves, plots it, and prints the value
just before and just after the point where a zero-length segment makes it jump.
"""

#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #
#  livecurves (composable modulation curves and envelopes in Python)                             #
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

from livecurves import breakpoints, ease_in, ease_out

filter_envelope = breakpoints(
    (0, 0.1),                     # start low
    (0.1, 1.0, ease_in(exp=3)),   # quick rise
    (0.6, 0.9),                   # hold high
    (0.6, 0.4),                   # sudden drop
    (1.0, 0.2, ease_out(exp=4)),  # slow fall
)
filter_envelope.show_plot(resolution=300)

print(filter_envelope.value_at(0.5999))
print(filter_envelope.value_at(0.6))
