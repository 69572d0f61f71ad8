"""Tests for dbug.timing — elapsed-time markers between emitted lines."""

import time

import pytest

from dbug.timing import ElapsedTimer


class TestElapsedTimer:
    """Behavior against an injected fake clock."""

    def test_first_suffix_is_zero(self, clock):
        timer = ElapsedTimer(clock)
        assert timer.last is None
        assert timer.elapsed_suffix() == "+0"

    def test_first_suffix_zero_even_after_delay(self, clock):
        timer = ElapsedTimer(clock)
        clock.advance_ms(500)
        assert timer.elapsed_suffix() == "+0"

    def test_second_suffix_reports_delta(self, clock):
        timer = ElapsedTimer(clock)
        timer.elapsed_suffix()
        clock.advance_ms(158)
        assert timer.elapsed_suffix() == "+158"

    def test_delta_is_since_previous_line(self, clock):
        timer = ElapsedTimer(clock)
        timer.elapsed_suffix()
        clock.advance_ms(100)
        timer.elapsed_suffix()
        clock.advance_ms(30)
        assert timer.elapsed_suffix() == "+30"

    def test_truncates_not_rounds(self, clock):
        timer = ElapsedTimer(clock)
        timer.elapsed_suffix()
        clock.advance_ms(1.9)
        assert timer.elapsed_suffix() == "+1"

    def test_sub_millisecond_is_zero(self, clock):
        timer = ElapsedTimer(clock)
        timer.elapsed_suffix()
        clock.advance_ms(0.4)
        assert timer.elapsed_suffix() == "+0"

    def test_elapsed_ms_does_not_stamp(self, clock):
        timer = ElapsedTimer(clock)
        assert timer.elapsed_ms() is None
        timer.stamp()
        clock.advance_ms(20)
        assert timer.elapsed_ms() == 20
        clock.advance_ms(20)
        assert timer.elapsed_ms() == 40

    def test_suffix_stamps_current_time(self, clock):
        timer = ElapsedTimer(clock)
        clock.advance_ms(7)
        timer.elapsed_suffix()
        assert timer.last == clock.now

    def test_reset(self, clock):
        timer = ElapsedTimer(clock)
        timer.elapsed_suffix()
        clock.advance_ms(50)
        timer.reset()
        assert timer.elapsed_suffix() == "+0"


@pytest.mark.slow
class TestElapsedTimerRealClock:
    """Behavior against the real monotonic clock."""

    def test_sleep_is_reported(self):
        timer = ElapsedTimer()
        assert timer.elapsed_suffix() == "+0"
        time.sleep(0.05)
        ms = int(timer.elapsed_suffix()[1:])
        assert 45 <= ms < 1000

    def test_stamps_never_go_backwards(self):
        timer = ElapsedTimer()
        stamps = []
        for _ in range(100):
            timer.elapsed_suffix()
            stamps.append(timer.last)
        assert stamps == sorted(stamps)
