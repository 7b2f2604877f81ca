"""
Тесты шлюза тиков и ускорения.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from clock import GameClock, SpeedRamp
from config import GAME_SPEED


class TestGameClock:
    def test_fires_when_interval_elapsed(self):
        clock = GameClock()
        assert clock.should_advance(0.2, 0.2) is True
        assert clock.last_update_time == 0.2

    def test_no_side_effect_when_too_early(self):
        clock = GameClock(start=1.0)
        assert clock.should_advance(0.2, 1.1) is False
        assert clock.last_update_time == 1.0

    def test_measures_from_last_fire(self):
        clock = GameClock()
        assert clock.should_advance(0.2, 0.25) is True
        assert clock.should_advance(0.2, 0.40) is False
        assert clock.should_advance(0.2, 0.45) is True

    def test_shorter_interval_fires_sooner(self):
        clock = GameClock()
        assert clock.should_advance(0.2, 0.15) is False
        assert clock.should_advance(0.1, 0.15) is True


class TestSpeedRamp:
    def test_defaults(self):
        ramp = SpeedRamp()
        assert ramp.interval == GAME_SPEED
        assert ramp.last_speed_up_time == 0.0

    def test_no_speed_up_before_ten_seconds(self):
        ramp = SpeedRamp(start=0.0)
        assert ramp.update(9.99) is False
        assert ramp.interval == GAME_SPEED

    def test_speed_up_after_ten_seconds(self):
        ramp = SpeedRamp(start=0.0)
        assert ramp.update(10.0) is True
        assert ramp.interval == pytest.approx(GAME_SPEED * 0.9)
        assert ramp.last_speed_up_time == 10.0

    def test_speed_up_is_periodic(self):
        ramp = SpeedRamp(start=0.0)
        ramp.update(10.0)
        assert ramp.update(15.0) is False
        assert ramp.update(20.0) is True
        assert ramp.interval == pytest.approx(GAME_SPEED * 0.9 * 0.9)

    def test_interval_is_monotonic(self):
        ramp = SpeedRamp(start=0.0)
        previous = ramp.interval
        for t in range(0, 120):
            ramp.update(float(t))
            assert ramp.interval <= previous
            previous = ramp.interval

    def test_reset(self):
        ramp = SpeedRamp(start=0.0)
        ramp.update(10.0)
        ramp.update(20.0)
        ramp.reset(25.0)
        assert ramp.interval == GAME_SPEED
        assert ramp.last_speed_up_time == 25.0
        assert ramp.update(34.0) is False
