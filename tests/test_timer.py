from unittest.mock import patch

import pytest

from bipedctl.timer import Timer


def test_elapsed_units():
    with patch("time.monotonic_ns", side_effect=[1_000, 2_000_001_000, 2_000_001_000, 2_000_001_000]):
        timer = Timer()
        assert timer.elapsed_ns() == 2_000_000_000
        assert timer.elapsed_ms() == pytest.approx(2000.0)
        assert timer.elapsed_seconds() == pytest.approx(2.0)


def test_restart_resets_origin():
    with patch("time.monotonic_ns", side_effect=[0, 500, 700]):
        timer = Timer()
        timer.start()
        assert timer.elapsed_ns() == 200


def test_real_clock_is_non_negative_and_monotonic():
    timer = Timer()
    first = timer.elapsed_ns()
    second = timer.elapsed_ns()
    assert 0 <= first <= second