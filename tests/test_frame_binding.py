import numpy as np
import pytest

from frame_binding import FrameBinding, unit_vector


def test_unit_vector():
    assert np.allclose(unit_vector([0.0, 3.0, 4.0]), [0.0, 0.6, 0.8])
    assert np.array_equal(unit_vector([0.0, 0.0, 0.0]), [0.0, 0.0, 0.0])


def test_velocity_binding_pushes_along_direction():
    binding = FrameBinding('velocity', anchor=(0.0, 0.0, 3.0))
    translation = binding.apply(np.zeros(3), np.array([0.5, 2.0]))
    # (0, 0, 0.5) lies below the anchor so the direction is -z
    assert np.allclose(translation, [0.0, 0.0, -2.0])


def test_velocity_binding_accumulates():
    binding = FrameBinding('velocity', anchor=(0.0, 0.0, 3.0))
    translation = np.zeros(3)
    for _ in range(3):
        translation = binding.apply(translation, np.array([0.5, 0.1]))
    assert np.allclose(translation, [0.0, 0.0, -0.3])


def test_velocity_binding_at_anchor_does_not_move():
    binding = FrameBinding('velocity', anchor=(0.0, 0.0, 3.0))
    translation = np.array([1.0, 2.0, 3.0])
    assert np.allclose(binding.apply(translation, np.array([3.0, 5.0])), translation)


def test_position_binding_is_absolute():
    binding = FrameBinding('position', anchor=(0.0, 0.0, 3.0), start_translation=(1.0, 0.0, 0.0))
    first = binding.apply(np.array([9.0, 9.0, 9.0]), np.array([0.5, 7.0]))
    second = binding.apply(first, np.array([0.5, -7.0]))
    assert np.allclose(first, [1.0, 0.0, -0.5])
    assert np.allclose(second, first)


def test_unknown_mode():
    with pytest.raises(ValueError):
        FrameBinding('acceleration')


def test_from_config():
    binding = FrameBinding.from_config({'binding': 'position', 'anchor': (0.0, 0.0, 1.0),
                                        'start_translation': (0.0, 0.0, 0.0)})
    assert binding.mode == 'position'
    assert np.allclose(binding.axis, [0.0, 0.0, -1.0])
