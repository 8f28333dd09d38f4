from __future__ import annotations

import pytest

from livecurves import Sequencer, Timeseries, sequencer, timeseries


def test_timeseries_interpolates() -> None:
    curve = timeseries([0, 1, 0])
    assert curve(0.0) == 0.0
    assert curve(0.25) == 0.5
    assert curve(0.5) == 1.0
    assert curve(1.0) == 0.0


def test_timeseries_normalizes_values() -> None:
    curve = timeseries([10, 30, 20])
    assert curve.normalized_values == (0.0, 1.0, 0.5)
    assert curve.values == (10, 30, 20)
    assert curve(0.75) == pytest.approx(0.75)


def test_timeseries_degenerate_inputs() -> None:
    assert timeseries([])(0.3) == 0.5
    assert timeseries([7])(0.0) == 0.5
    assert timeseries([7])(0.9) == 0.5
    assert timeseries([4, 4, 4])(0.6) == 0.5


def test_timeseries_clamps_position() -> None:
    curve = timeseries([0, 1])
    assert curve(-1.0) == 0.0
    assert curve(2.0) == 1.0


def test_sequencer_steps_through_raw_values() -> None:
    curve = sequencer([0, 0.5, 1], smooth=False)
    assert curve(0.0) == 0
    assert curve(0.4) == 0.5
    assert curve(0.7) == 1


def test_sequencer_wraps_around() -> None:
    curve = sequencer([10, 20, 30])
    assert curve(1.0) == 10
    assert curve(-0.1) == 30
    assert curve(1.5) == 20


def test_sequencer_can_hold_anything() -> None:
    assert sequencer(["a", "b"])(0.75) == "b"


def test_smooth_sequencer_is_a_timeseries() -> None:
    curve = sequencer([0, 1], smooth=True)
    assert curve(0.0) == 0
    assert curve(0.5) == 0.5
    assert curve(1.0) == 1.0
    assert sequencer([5, 15, 10], smooth=True)(0.25) == timeseries([5, 15, 10])(0.25)


def test_empty_sequencer() -> None:
    with pytest.raises(ValueError):
        Sequencer([])
    assert sequencer([], smooth=True)(0.5) == 0.5


def test_config() -> None:
    assert Sequencer([1, 2], smooth=True).config == {"values": (1, 2), "smooth": True}
    assert Timeseries([1, 2]).config == {"values": (1, 2)}
