from __future__ import annotations

import logging

import pytest

from livecurves import Breakpoints, Lfo, adsr, ease_in, lfo


def test_adsr_shape() -> None:
    curve = adsr(attack=0.25, decay=0.25, sustain=0.25, release=0.25, sustain_level=0.8)
    assert isinstance(curve, Breakpoints)
    assert curve(0.0) == 0
    assert curve(0.25) == pytest.approx(1.0, abs=0.01)
    assert curve(0.6) == pytest.approx(0.8, abs=0.01)
    assert curve(1.0) == 0


def test_adsr_normalizes_durations() -> None:
    curve = adsr(attack=1, decay=1, sustain=1, release=1, sustain_level=0.5)
    assert curve.times == (0.0, 0.25, 0.5, 0.75, 1.0)
    assert curve.values == (0.0, 1.0, 0.5, 0.5, 0.0)


def test_adsr_defaults() -> None:
    curve = adsr()
    assert curve(0.0) == 0
    assert curve(0.01) == pytest.approx(1.0, abs=0.01)
    assert curve(0.5) == pytest.approx(0.8)
    assert curve(1.0) == 0


def test_adsr_named_shapes() -> None:
    curve = adsr(0.25, 0.25, 0.25, 0.25, shape="exponential")
    # halfway through the attack, eased in
    assert curve(0.125) == pytest.approx(0.25)
    # the sustain segment stays linear whatever the shape
    assert curve(0.625) == pytest.approx(0.8)
    assert adsr(0.25, 0.25, 0.25, 0.25, shape="logarithmic")(0.125) == pytest.approx(1 - 0.5 ** 3)
    assert adsr(0.25, 0.25, 0.25, 0.25, shape="step")(0.125) == 1


def test_adsr_accepts_a_curve_as_shape() -> None:
    curve = adsr(0.25, 0.25, 0.25, 0.25, shape=ease_in(exp=3))
    assert curve(0.125) == pytest.approx(0.125)


def test_adsr_unknown_shape_falls_back_to_linear(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="livecurves.presets"):
        curve = adsr(0.25, 0.25, 0.25, 0.25, shape="wobbly")
    assert "wobbly" in caplog.text
    assert curve(0.125) == pytest.approx(0.5)


def test_adsr_needs_some_duration() -> None:
    with pytest.raises(ValueError):
        adsr(0, 0, 0, 0)


def test_lfo_swings_around_offset() -> None:
    curve = lfo(shape="sine", rate=1, depth=0.5, offset=0.5)
    for i in range(5):
        assert 0.25 <= curve(i / 4.0) <= 0.75
    assert curve(0.25) == pytest.approx(0.75)
    assert curve(0.75) == pytest.approx(0.25)


@pytest.mark.parametrize("shape, position, expected", [
    ("triangle", 0.5, 0.5),
    ("saw", 0.0, 0.5),
    ("pulse", 0.75, 0.5),
    ("pulse", 0.25, -0.5),
])
def test_lfo_shapes(shape: str, position: float, expected: float) -> None:
    assert lfo(shape=shape)(position) == pytest.approx(expected)


def test_lfo_rate_is_passed_on() -> None:
    curve = lfo(shape="sine", rate=2)
    assert curve.wave.config["rate"] == 2
    assert curve(0.125) == pytest.approx(0.5)


def test_lfo_noise(fixed_random) -> None:
    assert lfo(shape="noise", depth=2, offset=1, rng=fixed_random(0.75))(0.3) == pytest.approx(1.5)


def test_lfo_unknown_shape_falls_back_to_sine(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="livecurves.presets"):
        curve = lfo(shape="square-ish")
    assert "square-ish" in caplog.text
    assert isinstance(curve, Lfo)
    assert curve.config["shape"] == "sine"
    assert curve(0.25) == pytest.approx(0.5)
