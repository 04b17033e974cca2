# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 11:02:51 2026

"""
# integration_driver.py
import numpy as np
from scipy.integrate import BDF, Radau

from msd_system import ConfigurationError, MSDSystem

IMPLICIT_METHODS = {
    'Radau': Radau,
    'BDF': BDF,
}


class ConvergenceError(RuntimeError):
    """Raised when an advance cannot produce a trustworthy state."""


class IntegrationDriver:
    """
    Owns a persistent implicit ODE solver and advances it frame by frame.

    The solver is built once with an open-ended bound. Each call to advance()
    re-targets it so the final sub-step lands exactly on the requested time,
    which keeps the step-size history across frames.

    Only increasing target times are supported. A target equal to the current
    time returns the current state, a target earlier than it raises ValueError.
    """

    def __init__(self, msd_system: MSDSystem, initial_state=None, t0=0.0,
                 method='Radau', atol=1e-6, rtol=1e-6, max_steps=100000):
        if method not in IMPLICIT_METHODS:
            raise ConfigurationError(f"Unknown implicit method: {method}. Choose one of {sorted(IMPLICIT_METHODS)}.")
        if not (atol > 0 and rtol > 0):
            raise ConfigurationError(f"Tolerances must be positive, got atol={atol}, rtol={rtol}.")
        if int(max_steps) < 1:
            raise ConfigurationError(f"max_steps must be at least 1, got {max_steps}.")

        if initial_state is None:
            initial_state = msd_system.initial_state
        initial_state = np.array(initial_state, dtype=float)
        if initial_state.shape != (2,) or not np.all(np.isfinite(initial_state)):
            raise ConfigurationError(f"Initial state must be two finite values, got {initial_state}.")

        self.msd_system = msd_system
        self.method = method
        self.atol = atol
        self.rtol = rtol
        self.max_steps = int(max_steps)

        self._t = float(t0)
        self._y = initial_state
        self._status = 'running'
        self._error = None
        self.last_step_count = 0
        self.total_steps = 0

        # No first_step or minimum step: the controller picks step sizes freely
        self._solver = IMPLICIT_METHODS[method](
            msd_system.derivative, self._t, self._y.copy(), np.inf,
            rtol=rtol, atol=atol, jac=self._jacobian)

    def _jacobian(self, t, y):
        dfdy, _ = self.msd_system.jacobian(t, y)
        return dfdy

    @classmethod
    def from_config(cls, msd_system, solver_config):
        return cls(msd_system, method=solver_config.get('method', 'Radau'),
                   atol=solver_config.get('atol', 1e-6), rtol=solver_config.get('rtol', 1e-6),
                   max_steps=solver_config.get('max_steps', 100000))

    @property
    def t(self):
        return self._t

    @property
    def state(self):
        return self._y.copy()

    @property
    def status(self):
        return self._status

    @property
    def stats(self):
        if self._solver is None:
            return {'nfev': 0, 'njev': 0, 'nlu': 0, 'steps': self.total_steps}
        return {'nfev': self._solver.nfev, 'njev': self._solver.njev,
                'nlu': self._solver.nlu, 'steps': self.total_steps}

    def advance(self, target_time):
        """Integrate up to target_time and return a copy of [position, velocity]."""
        if self._status == 'closed':
            raise RuntimeError("Integration session has been closed.")
        if self._status == 'failed':
            raise ConvergenceError(f"Integration session previously failed at t={self._t}: {self._error}")

        target_time = float(target_time)
        if target_time < self._t:
            raise ValueError(f"Cannot advance backwards from t={self._t} to t={target_time}.")
        if target_time == self._t:
            self.last_step_count = 0
            return self._y.copy()

        solver = self._solver
        solver.t_bound = target_time
        solver.status = 'running'

        steps = 0
        while solver.status == 'running':
            if steps >= self.max_steps:
                self._fail(f"exceeded {self.max_steps} sub-steps before reaching t={target_time} (stopped at t={solver.t})")
            message = solver.step()
            steps += 1
            if solver.status == 'failed':
                self._fail(f"{message} (t={solver.t})")

        self.last_step_count = steps
        self.total_steps += steps

        y = np.array(solver.y, dtype=float)
        if not np.all(np.isfinite(y)):
            self._fail(f"non-finite state {y} at t={target_time}")

        self._t = target_time
        self._y = y
        return self._y.copy()

    def _fail(self, reason):
        self._status = 'failed'
        self._error = reason
        raise ConvergenceError(reason)

    def close(self):
        self._solver = None
        self._status = 'closed'

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
