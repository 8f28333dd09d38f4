from __future__ import annotations

import pytest

from livecurves import Chain, Mix, chain, const, ease_in_out, mix, ramp, sine, to_array


def test_chain_composes_in_order() -> None:
    f = lambda x: x + 0.25  # noqa: E731
    g = lambda x: x * 2  # noqa: E731
    curve = chain(f, g)
    for p in (0.0, 0.3, 0.5):
        assert curve(p) == g(f(p))
    assert chain(g, f)(0.5) == f(g(0.5))


def test_chain_feeds_outputs_forward() -> None:
    curve = chain(lambda x: x * 0.5, lambda x: x * 0.5)
    assert curve(1.0) == 0.25


def test_chain_of_curves() -> None:
    wobble = chain(sine(rate=4), ease_in_out(exp=2))
    assert wobble(0.3) == ease_in_out(exp=2)(sine(rate=4)(0.3))


def test_empty_chain_is_identity() -> None:
    assert chain()(0.3) == 0.3


@pytest.mark.parametrize("p", [0.0, 0.3, 1.0])
def test_mix_weights(p: float) -> None:
    assert mix(const(0), 1, const(1), 1)(p) == 0.5
    assert mix(const(0), 1, const(1), 3)(p) == 0.75


def test_mix_evaluates_every_curve_at_the_original_position() -> None:
    curve = mix(ramp(), 1, sine(), 1)
    assert curve(0.25) == pytest.approx((0.25 + 1.0) / 2)


def test_mix_without_weights() -> None:
    assert mix(ramp())(0.4) == 0.4
    assert Mix([const(0), const(1)])(0.2) == 0.5
    assert Mix([const(0), const(1), const(2)]).weights == pytest.approx((1 / 3, 1 / 3, 1 / 3))


def test_mix_rejects_bad_weights() -> None:
    with pytest.raises(ValueError):
        mix(const(0), 1, const(1))
    with pytest.raises(ValueError):
        mix(const(0), 1, const(1), -1)


def test_mix_of_curves_alone_weighs_them_equally() -> None:
    assert mix(const(0), const(1))(0.3) == 0.5
    assert mix(ramp(), sine(), const(1))(0.25) == pytest.approx((0.25 + 1.0 + 1.0) / 3)
    assert mix(lambda p: 0, lambda p: 1).weights == (0.5, 0.5)


def test_mix_rejects_non_numeric_weights() -> None:
    with pytest.raises(ValueError, match="numbers"):
        Mix([const(0), const(1)], [1, "heavy"])
    with pytest.raises(ValueError, match="numbers"):
        mix(const(0), 1, const(1), const(2))


def test_to_array_samples_evenly() -> None:
    assert to_array(ramp(), 5) == [0.0, 0.2, 0.4, 0.6, 0.8]
    assert ramp().to_array(4) == [0.0, 0.25, 0.5, 0.75]


def test_to_array_maps_samples() -> None:
    assert to_array(ramp(), 4, map_func=lambda v: 60 + v * 24) == [60.0, 66.0, 72.0, 78.0]


def test_to_array_accepts_plain_functions() -> None:
    assert to_array(lambda p: p * 2, 2) == [0.0, 1.0]


def test_to_array_edge_counts() -> None:
    assert to_array(ramp(), 0) == []
    with pytest.raises(ValueError):
        to_array(ramp(), -1)


def test_combinators_expose_their_parts() -> None:
    r = ramp()
    assert Chain([r]).curves == (r,)
    assert mix(r, 2).config == {"curves": (r,), "weights": (2,)}
