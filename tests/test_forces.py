import numpy as np
import pytest

from bipedctl.forces import (
    FORCE_LIMIT,
    KEYCODE_DOWN,
    KEYCODE_LEFT,
    KEYCODE_RIGHT,
    KEYCODE_SPACE,
    KEYCODE_UP,
    ForceMode,
    ForceTeleop,
    average_contact_force,
    scale_force_for_display,
)


def test_default_mode_is_pulsed_and_zero():
    teleop = ForceTeleop()
    assert teleop.mode is ForceMode.PULSED
    assert teleop.force == (0.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "code, expected",
    [
        (KEYCODE_UP, (60.0, 0.0, 0.0)),
        (KEYCODE_DOWN, (-60.0, 0.0, 0.0)),
        (KEYCODE_LEFT, (0.0, 30.0, 0.0)),
        (KEYCODE_RIGHT, (0.0, -30.0, 0.0)),
    ],
)
def test_pulsed_keys_set_fixed_force(code, expected):
    teleop = ForceTeleop()
    assert teleop.handle_key(code) == expected


def test_pulsed_release_zeroes_force():
    teleop = ForceTeleop()
    teleop.handle_key(KEYCODE_UP)
    assert teleop.release() == (0.0, 0.0, 0.0)
    assert teleop.force == (0.0, 0.0, 0.0)


def test_repeated_pulse_does_not_accumulate():
    teleop = ForceTeleop()
    first = teleop.handle_key(KEYCODE_UP)
    second = teleop.handle_key(KEYCODE_UP)
    assert first == second


def test_space_toggles_mode_and_zeroes():
    teleop = ForceTeleop(ForceMode.CONTINUOUS)
    teleop.handle_key(KEYCODE_UP)
    result = teleop.handle_key(KEYCODE_SPACE)
    assert teleop.mode is ForceMode.PULSED
    assert result == (0.0, 0.0, 0.0)
    teleop.handle_key(KEYCODE_SPACE)
    assert teleop.mode is ForceMode.CONTINUOUS


def test_continuous_up_then_down_returns_to_zero():
    teleop = ForceTeleop(ForceMode.CONTINUOUS)
    teleop.handle_key(KEYCODE_UP)
    teleop.handle_key(KEYCODE_UP)
    teleop.handle_key(KEYCODE_DOWN)
    teleop.handle_key(KEYCODE_DOWN)
    assert teleop.force == (0.0, 0.0, 0.0)


def test_continuous_force_is_clamped():
    teleop = ForceTeleop(ForceMode.CONTINUOUS)
    for _ in range(50):
        teleop.handle_key(KEYCODE_UP)
        teleop.handle_key(KEYCODE_RIGHT)
    assert teleop.fx == FORCE_LIMIT
    assert teleop.fy == -FORCE_LIMIT


def test_continuous_release_keeps_force():
    teleop = ForceTeleop(ForceMode.CONTINUOUS)
    pushed = teleop.handle_key(KEYCODE_LEFT)
    assert teleop.release() == pushed
    assert pushed[1] > 0


def test_continuous_left_grows_monotonically():
    teleop = ForceTeleop(ForceMode.CONTINUOUS)
    values = [teleop.handle_key(KEYCODE_LEFT)[1] for _ in range(5)]
    assert values == sorted(values)
    assert len(set(values)) == 5


def test_unknown_key_is_ignored():
    teleop = ForceTeleop()
    assert teleop.handle_key(0x61) is None
    assert teleop.force == (0.0, 0.0, 0.0)


def test_character_key_is_accepted():
    teleop = ForceTeleop()
    assert teleop.handle_key(" ") == (0.0, 0.0, 0.0)
    assert teleop.mode is ForceMode.CONTINUOUS


def test_multi_character_key_rejected():
    with pytest.raises(ValueError):
        ForceTeleop().handle_key("ab")


def test_average_of_no_contacts_is_zero():
    assert np.array_equal(average_contact_force([]), np.zeros(3))


def test_average_of_identical_forces_is_that_force():
    force = [1.5, -2.0, 9.0]
    result = average_contact_force([force, force, force])
    assert np.allclose(result, force)


def test_average_is_symmetric_around_mean():
    forces = [[1.0, 2.0, 3.0], [-1.0, -2.0, -3.0]]
    assert np.allclose(average_contact_force(forces), np.zeros(3))


def test_average_rejects_bad_shape():
    with pytest.raises(ValueError):
        average_contact_force([[1.0, 2.0]])


def test_display_scale_round_trip():
    force = np.array([40.0, -20.0, 100.0])
    scaled = scale_force_for_display(force)
    assert np.allclose(scaled * 20.0, force)


def test_display_scale_rejects_bad_shape():
    with pytest.raises(ValueError):
        scale_force_for_display([1.0, 2.0])