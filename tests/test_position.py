from __future__ import annotations

import math

import pytest

from livecurves import calc_pos, calc_pos_linear, clamp, normalize, pos_to_radians


@pytest.mark.parametrize("value, expected", [(-0.5, 0.0), (0.0, 0.0), (0.5, 0.5), (1.0, 1.0), (1.5, 1.0)])
def test_clamp_bounds_to_unit_interval(value: float, expected: float) -> None:
    assert clamp(value) == expected


def test_calc_pos_wraps_one_to_zero() -> None:
    assert calc_pos(1.0) == 0.0
    assert calc_pos(0.25) == 0.25


def test_calc_pos_applies_rate_and_phase() -> None:
    assert calc_pos(0.25, rate=2) == 0.5
    assert calc_pos(0.75, rate=2) == 0.5
    assert calc_pos(0.5, phase=0.25) == 0.75
    assert calc_pos(0.0, phase=-0.25) == 0.75


def test_calc_pos_clamps_before_modulating() -> None:
    assert calc_pos(-3.0, phase=0.25) == 0.25
    assert calc_pos(7.0, rate=0.5) == 0.5


def _recording(value: float, seen: list):
    def parameter(p: float) -> float:
        seen.append(p)
        return value
    return parameter


@pytest.mark.parametrize("position_function", [calc_pos, calc_pos_linear])
def test_rate_curve_sees_clamped_position_and_phase_curve_sees_scaled_position(position_function) -> None:
    rate_positions = []
    phase_positions = []
    position_function(0.3, _recording(2, rate_positions), _recording(0, phase_positions))
    assert rate_positions == [pytest.approx(0.3)]
    assert phase_positions == [pytest.approx(0.6)]

    rate_positions.clear()
    position_function(1.5, _recording(0.5, rate_positions), 0)
    assert rate_positions == [1.0]


def test_calc_pos_linear_keeps_terminal_one_only_without_modulation() -> None:
    assert calc_pos_linear(1.0) == 1.0
    assert calc_pos_linear(3.0) == 1.0
    assert calc_pos_linear(1.0, rate=2) == 0.0
    assert calc_pos_linear(1.0, phase=0.25) == 0.25
    assert calc_pos_linear(0.5, phase=0.5) == 0.0


def test_calc_pos_linear_terminal_check_uses_resolved_parameters() -> None:
    assert calc_pos_linear(1.0, rate=lambda p: 1, phase=lambda p: 0) == 1.0
    assert calc_pos_linear(1.0, rate=lambda p: 1, phase=lambda p: 0.5) == 0.5


def test_pos_to_radians() -> None:
    assert pos_to_radians(0) == 0
    assert pos_to_radians(0.5) == pytest.approx(math.pi)
    assert pos_to_radians(2) == pytest.approx(2 * math.pi)


def test_normalize() -> None:
    assert normalize([]) == []
    assert normalize([3, 3, 3]) == [0.5, 0.5, 0.5]
    assert normalize([-10, 0, 10]) == [0.0, 0.5, 1.0]
    assert normalize([0, 50, 100]) == [0.0, 0.5, 1.0]
    assert normalize((4,)) == [0.5]
