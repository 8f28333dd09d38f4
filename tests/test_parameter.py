from __future__ import annotations

import pytest

from livecurves import CurveParameter, Parameter, ScalarParameter, apply_amp_bias, ramp, resolve


def test_wrap_picks_the_right_kind_of_parameter() -> None:
    scalar = Parameter.wrap(3)
    assert isinstance(scalar, ScalarParameter)
    assert scalar.raw == 3

    curve = ramp()
    wrapped = Parameter.wrap(curve)
    assert isinstance(wrapped, CurveParameter)
    assert wrapped.raw is curve

    assert Parameter.wrap(wrapped) is wrapped
    assert isinstance(Parameter.wrap(lambda p: p), CurveParameter)


def test_resolve_scalars_and_curves() -> None:
    assert resolve(2, 0.3) == 2
    assert resolve(lambda p: p * 2, 0.3) == pytest.approx(0.6)
    assert resolve(ScalarParameter(5), 0.9) == 5
    assert resolve(CurveParameter(ramp()), 0.25) == 0.25


def test_resolving_does_not_change_the_parameter() -> None:
    parameter = Parameter.wrap(0.7)
    for position in (0.0, 0.5, 1.0):
        assert parameter.resolve(position) == 0.7
    assert parameter.raw == 0.7
    assert parameter == ScalarParameter(0.7)


def test_apply_amp_bias() -> None:
    assert apply_amp_bias(0.5, 2, 0.1) == pytest.approx(1.1)
    assert apply_amp_bias(0.5, 1, 0) == 0.5


def test_apply_amp_bias_evaluates_curves_at_the_given_position() -> None:
    seen = []

    def amp(p: float) -> float:
        seen.append(p)
        return 2

    assert apply_amp_bias(0.4, amp, 0, position=0.9) == pytest.approx(0.8)
    assert seen == [0.9]


def test_apply_amp_bias_defaults_to_the_value_as_position() -> None:
    assert apply_amp_bias(0.5, lambda p: p, lambda p: p) == pytest.approx(0.75)
