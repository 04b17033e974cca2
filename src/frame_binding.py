# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 09:41:27 2026

"""
# frame_binding.py
import numpy as np

BINDING_MODES = ('velocity', 'position')


def unit_vector(vector):
    """Normalises a vector, returning zeros for a zero-length input."""
    vector = np.asarray(vector, dtype=float)
    norm = np.linalg.norm(vector)
    if norm == 0:
        return np.zeros_like(vector)
    return vector / norm


class FrameBinding:
    """
    Maps the oscillator state onto the translation of a drawable.

    'velocity': the drawable is pushed by direction * velocity every frame,
                direction pointing from the anchor towards (0, 0, position).
    'position': the drawable sits at start + axis * position, axis pointing
                from the anchor towards the origin.
    """

    def __init__(self, mode='velocity', anchor=(0.0, 0.0, 3.0), start_translation=(0.0, 0.0, 0.0)):
        if mode not in BINDING_MODES:
            raise ValueError(f"Unknown binding mode: {mode}. Choose 'velocity' or 'position'.")
        self.mode = mode
        self.anchor = np.array(anchor, dtype=float)
        self.start_translation = np.array(start_translation, dtype=float)
        self.axis = unit_vector(-self.anchor)

    @classmethod
    def from_config(cls, scene_config):
        return cls(mode=scene_config.get('binding', 'velocity'),
                   anchor=scene_config.get('anchor', (0.0, 0.0, 3.0)),
                   start_translation=scene_config.get('start_translation', (0.0, 0.0, 0.0)))

    def direction(self, position):
        return unit_vector(np.array([0.0, 0.0, position]) - self.anchor)

    def apply(self, translation, state):
        """Returns the new translation for a [position, velocity] state."""
        position, velocity = state[0], state[1]
        if self.mode == 'velocity':
            return np.asarray(translation, dtype=float) + self.direction(position) * velocity
        return self.start_translation + self.axis * position
