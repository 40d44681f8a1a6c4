"""Tests for the RSI momentum indicator."""

import math

import pytest

from stream_indicators import RSI, RsiPhase, SMA, InvalidDataError, InvalidParameterError


def _feed(rsi: RSI, values) -> list:
    """Feed a series and collect every return value."""
    return [rsi.update(v) for v in values]


class TestRSIConstruction:

    def test_rejects_zero_period(self):
        with pytest.raises(InvalidParameterError):
            RSI(0)

    def test_accepts_period_one(self):
        assert RSI(1).period == 1

    def test_default_period(self):
        assert RSI().period == 14

    def test_display(self):
        assert str(RSI(16)) == "RSI(16)"

    def test_owns_two_sma_children(self):
        rsi = RSI(5)
        children = rsi.children
        assert len(children) == 2
        assert all(isinstance(child, SMA) and child.period == 5 for child in children)
        assert rsi.up_ma is not rsi.down_ma


class TestRSIUpdate:

    def test_canonical_sequence(self):
        rsi = RSI(3)

        assert rsi.update(10.0) == 50.0
        assert rsi.update(10.5) == 100.0
        assert rsi.update(10.0) == pytest.approx(50.0)
        # U = 0.5 / 3, D = 1.0 / 3
        assert rsi.update(9.5) == pytest.approx(100.0 / 3.0)

    def test_first_sample_is_neutral(self):
        rsi = RSI(14)
        assert rsi.update(1234.5) == 50.0
        assert rsi.average_gain == 0.0
        assert rsi.average_loss == 0.0

    def test_equal_values_feed_zero_to_both_averages(self):
        rsi = RSI(3)
        assert _feed(rsi, [10.0, 10.0, 10.0]) == [50.0, 50.0, 50.0]
        assert rsi.up_ma.get_history() == [0.0, 0.0, 0.0]
        assert rsi.down_ma.get_history() == [0.0, 0.0, 0.0]

    def test_rising_sequence_is_100(self):
        rsi = RSI(5)
        outputs = _feed(rsi, [float(x) for x in range(1, 21)])
        assert outputs[0] == 50.0
        assert all(v == 100.0 for v in outputs[1:])

    def test_gains_without_losses_are_exactly_100(self):
        rsi = RSI(3)
        outputs = _feed(rsi, [100.0, 1e16, 1e16 + 2, 1e16 + 4])
        assert rsi.average_loss == 0.0
        assert outputs == [50.0, 100.0, 100.0, 100.0]

    def test_non_decreasing_with_flat_start(self):
        rsi = RSI(2)
        # U = 0 while flat, then (0 + 1) / 2 with D = 0
        assert _feed(rsi, [1.0, 1.0, 2.0]) == [50.0, 50.0, 100.0]

    def test_falling_sequence_is_0(self):
        rsi = RSI(5)
        outputs = _feed(rsi, [float(x) for x in range(20, 0, -1)])
        assert outputs[0] == 50.0
        assert all(v == 0.0 for v in outputs[1:])

    def test_neutral_when_moves_leave_window(self):
        rsi = RSI(2)
        outputs = _feed(rsi, [1.0, 2.0, 2.0, 2.0])
        assert outputs == [50.0, 100.0, 100.0, 50.0]

    def test_bounded_on_random_walk(self, random_walk):
        rsi = RSI(14)
        for value in _feed(rsi, random_walk):
            assert 0.0 <= value <= 100.0

    def test_bar_and_mapping_inputs(self, make_bar):
        by_bar, by_map, by_float = RSI(3), RSI(3), RSI(3)
        for close in (10.0, 10.5, 10.0, 9.5, 11.0):
            expected = by_float.update(close)
            assert by_bar.update(make_bar(close)) == expected
            assert by_map.update({'close': close}) == expected

    def test_custom_input_field(self, make_bar):
        rsi = RSI(3, input_field='low')
        rsi.update(make_bar(0.0, low=5.0))
        assert rsi.update(make_bar(0.0, low=6.0)) == 100.0

    def test_next_is_update_alias(self):
        rsi = RSI(3)
        assert rsi.next(10.0) == 50.0
        assert rsi.next(10.5) == 100.0

    def test_nan_propagates(self):
        rsi = RSI(3)
        rsi.update(10.0)
        assert math.isnan(rsi.update(math.nan))

    def test_rejects_bool_samples(self, make_bar):
        rsi = RSI(3)
        with pytest.raises(InvalidDataError):
            rsi.update(True)
        with pytest.raises(InvalidDataError):
            rsi.update(make_bar(False))
        assert rsi.count == 0


class TestRSIState:

    def test_inner_averages_step_in_lockstep(self, random_walk):
        rsi = RSI(4)
        for i, close in enumerate(random_walk[:30], start=1):
            rsi.update(close)
            assert rsi.count == rsi.up_ma.count == rsi.down_ma.count == i

    def test_previous_value(self):
        rsi = RSI(3)
        assert rsi.previous_value == 0.0
        rsi.update(10.0)
        assert rsi.previous_value == 10.0
        rsi.update(9.0)
        assert rsi.previous_value == 9.0

    def test_phases(self):
        rsi = RSI(3)
        assert rsi.phase is RsiPhase.FRESH

        rsi.update(1.0)
        assert rsi.phase is RsiPhase.WARMING
        rsi.update(2.0)
        assert rsi.phase is RsiPhase.WARMING
        assert not rsi.is_ready

        rsi.update(3.0)
        assert rsi.phase is RsiPhase.STEADY
        assert rsi.is_ready
        rsi.update(4.0)
        assert rsi.phase is RsiPhase.STEADY

        rsi.reset()
        assert rsi.phase is RsiPhase.FRESH

    def test_period_one_is_steady_after_first_sample(self):
        rsi = RSI(1)
        rsi.update(1.0)
        assert rsi.phase is RsiPhase.STEADY

    def test_value_before_first_sample_is_nan(self):
        rsi = RSI(3)
        assert math.isnan(rsi.value)
        assert math.isnan(rsi.average_gain)
        assert math.isnan(rsi.average_loss)
        assert math.isnan(rsi.relative_strength)

    def test_relative_strength(self):
        rsi = RSI(3)
        rsi.update(10.0)
        assert math.isnan(rsi.relative_strength)

        rsi.update(10.5)
        assert rsi.average_gain == 0.25
        assert rsi.average_loss == 0.0
        assert rsi.relative_strength == math.inf

        rsi.update(10.0)
        assert rsi.relative_strength == pytest.approx(1.0)

    def test_reset_parity(self):
        rsi = RSI(3)
        first = _feed(rsi, [10.0, 10.5])

        rsi.reset()

        assert rsi.previous_value == 0.0
        assert rsi.count == 0
        assert math.isnan(rsi.value)
        assert _feed(rsi, [10.0, 10.5]) == first == [50.0, 100.0]

    def test_reset_replays_identically(self, random_walk):
        rsi = RSI(14)
        first = _feed(rsi, random_walk[:60])
        rsi.reset()
        assert _feed(rsi, random_walk[:60]) == first

    def test_reset_clears_children(self):
        rsi = RSI(3)
        _feed(rsi, [1.0, 2.0, 3.0])
        rsi.reset()
        assert rsi.up_ma.count == 0
        assert rsi.down_ma.count == 0
