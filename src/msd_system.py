# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 10:13:40 2026

"""
# msd_system.py
from typing import NamedTuple

import numpy as np


class ConfigurationError(ValueError):
    """Raised when system parameters cannot define a valid oscillator."""


class ODEParameters(NamedTuple):
    c: float  # damping
    k: float  # stiffness
    M: float  # mass
    F: float  # constant forcing

    @classmethod
    def from_config(cls, system_params):
        return cls(c=float(system_params['c']), k=float(system_params['k']),
                   M=float(system_params['M']), F=float(system_params['F']))


class MSDSystem:
    def __init__(self, params: ODEParameters, y0=0.5, v0=0.0):
        self.params = params
        self.y0 = float(y0)
        self.v0 = float(v0)

        values = (*params, self.y0, self.v0)
        if not np.all(np.isfinite(values)):
            raise ConfigurationError(f"Parameters and initial state must be finite, got {values}.")
        if params.M <= 0:
            raise ConfigurationError(f"Mass (M) must be positive, got {params.M}.")
        if params.k <= 0:
            raise ConfigurationError(f"Spring constant (k) must be positive, got {params.k}.")
        if params.c < 0:
            raise ConfigurationError(f"Damping coefficient (c) cannot be negative, got {params.c}.")

        self.omega_n = np.sqrt(params.k / params.M)
        self.zeta = params.c / (2 * params.M * self.omega_n)

    @classmethod
    def from_config(cls, system_params):
        return cls(ODEParameters.from_config(system_params),
                   y0=system_params.get('y0', 0.5), v0=system_params.get('v0', 0.0))

    def derivative(self, t, y):
        """
        Right-hand side of the oscillator. State is [position, velocity].
        The system is autonomous so t is unused.
        """
        c, k, M, F = self.params
        return np.array([y[1], (F - c * y[1] - k * y[0]) / M])

    def jacobian(self, t, y):
        """Returns (dfdy, dfdt). dfdt is identically zero."""
        c, k, M, _ = self.params
        dfdy = np.array([[0.0, 1.0],
                         [-k / M, -c / M]])
        dfdt = np.zeros(2)
        return dfdy, dfdt

    @property
    def initial_state(self):
        return np.array([self.y0, self.v0])

    @property
    def equilibrium(self):
        return np.array([self.params.F / self.params.k, 0.0])

    @property
    def damping_regime(self):
        c, k, M, _ = self.params
        if c == 0:
            return 'undamped'
        discriminant = c**2 - 4 * M * k
        if abs(discriminant) <= 1e-12 * max(c**2, 4 * M * k):
            return 'critically damped'
        return 'underdamped' if discriminant < 0 else 'overdamped'

    def energy(self, y):
        """Mechanical energy 0.5*M*v^2 + 0.5*k*x^2, vectorised over the last axis."""
        y = np.asarray(y)
        return 0.5 * self.params.M * y[..., 1]**2 + 0.5 * self.params.k * y[..., 0]**2

    def analytic_state(self, t):
        """
        Closed-form position and velocity at time t starting from (y0, v0) at t=0.
        Works on scalars or arrays of t.
        """
        t = np.asarray(t, dtype=float)
        c, k, M, F = self.params
        u0 = self.y0 - F / k  # displacement from equilibrium
        v0 = self.v0
        gamma = c / (2 * M)
        regime = self.damping_regime

        if regime in ('undamped', 'underdamped'):
            w_d = np.sqrt(k / M - gamma**2)
            A = u0
            B = (v0 + gamma * u0) / w_d
            decay = np.exp(-gamma * t)
            cos, sin = np.cos(w_d * t), np.sin(w_d * t)
            u = decay * (A * cos + B * sin)
            v = decay * ((B * w_d - gamma * A) * cos - (A * w_d + gamma * B) * sin)
        elif regime == 'critically damped':
            A = u0
            B = v0 + gamma * u0
            decay = np.exp(-gamma * t)
            u = (A + B * t) * decay
            v = (B - gamma * (A + B * t)) * decay
        else:
            root = np.sqrt(gamma**2 - k / M)
            r1, r2 = -gamma + root, -gamma - root
            C1 = (v0 - r2 * u0) / (r1 - r2)
            C2 = u0 - C1
            u = C1 * np.exp(r1 * t) + C2 * np.exp(r2 * t)
            v = r1 * C1 * np.exp(r1 * t) + r2 * C2 * np.exp(r2 * t)

        return u + F / k, v
