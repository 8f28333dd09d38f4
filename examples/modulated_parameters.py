"""
livecurves Example: Modulated Parameters

Any parameter of a primitive can itself be a curve. Here a sine wave speeds up over time because its rate is a ramp,
and its amplitude follows an ADSR envelope. The result is sampled into a list and scaled to a cutoff frequency.
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

from livecurves import sine, ramp, adsr, mix, noise

speeding_up = sine(rate=ramp(amp=3, bias=1), amp=adsr(attack=0.1, decay=0.2, sustain=0.5, release=0.2))
speeding_up.show_plot(title="Sine with ramped rate and ADSR amplitude", resolution=500)

cutoffs = speeding_up.to_array(32, map_func=lambda value: 40 + value * 100)
print(cutoffs)

shimmer = mix(speeding_up, 0.8) + noise(amp=0.2)
print([round(shimmer(i / 8), 3) for i in range(8)])
