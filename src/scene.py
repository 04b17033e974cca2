# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 14:20:09 2026

"""
# scene.py
import itertools
import time

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from frame_binding import FrameBinding
from integration_driver import ConvergenceError, IntegrationDriver

NON_INTERACTIVE_BACKENDS = ('agg', 'pdf', 'pgf', 'ps', 'svg', 'cairo', 'template')


class FpsTimer:
    def __init__(self, period=1.0, clock=time.perf_counter):
        self.period = period
        self.clock = clock
        self.fps = 0
        self.event = False
        self._last = None
        self._window_start = None
        self._frames = 0

    def start(self):
        self._last = self.clock()
        self._window_start = self._last
        self._frames = 0

    def update(self):
        """Returns the seconds since the previous call and refreshes fps once per period."""
        if self._last is None:
            self.start()
        now = self.clock()
        time_interval = now - self._last
        self._last = now
        self._frames += 1

        self.event = False
        elapsed = now - self._window_start
        if elapsed >= self.period:
            self.fps = int(round(self._frames / elapsed))
            self._frames = 0
            self._window_start = now
            self.event = True
        return time_interval


class SceneContext:
    """
    Holds everything one window needs: the figure and its drawables, the
    input state and the integration session feeding the moving object.
    Input handlers are bound methods registered on the figure canvas.
    """

    def __init__(self, driver: IntegrationDriver, binding: FrameBinding, scene_config: dict):
        self.driver = driver
        self.binding = binding
        self.scene_config = scene_config
        self.window_title = scene_config.get('window_title', 'MSD Display')
        self.line_origin = np.array(scene_config.get('line_origin', (0.0, 0.0, 2.0)), dtype=float)

        self.translation = np.array(binding.start_translation, dtype=float)
        self.physics_frozen = False
        self.is_full_screen = False
        self.width, self.height = 0, 0
        self.mouse_position = (0.0, 0.0)
        self.time_interval = 0.0
        self.fps_record = FpsTimer(scene_config.get('fps_period', 1.0))
        self.animation = None

        self.fig = plt.figure(figsize=(8, 8))
        self.ax = self.fig.add_subplot(projection='3d')
        low, high = scene_config.get('axis_limits', (-3.0, 3.0))
        self.ax.set_xlim(low, high)
        self.ax.set_ylim(low, high)
        self.ax.set_zlim(low, high)
        self.ax.set_xlabel('x')
        self.ax.set_ylabel('y')
        self.ax.set_zlabel('z')

        self.ax.scatter(*self.binding.anchor, color='black', s=20)
        self.line, = self.ax.plot(*self._line_data(), color='gray', linewidth=2)
        self.p2, = self.ax.plot(*[[v] for v in self.translation], 'o', color='tab:red', markersize=10)
        self.gui_text = self.fig.text(0.02, 0.96, '', family='monospace', va='top')
        self._set_title(self.window_title)

        canvas = self.fig.canvas
        canvas.mpl_connect('key_press_event', self.on_key)
        canvas.mpl_connect('resize_event', self.on_resize)
        canvas.mpl_connect('motion_notify_event', self.on_mouse_move)
        canvas.mpl_connect('close_event', self.on_close)

    def _line_data(self):
        return [[self.line_origin[i], self.translation[i]] for i in range(3)]

    def _set_title(self, title):
        manager = self.fig.canvas.manager
        if manager is not None:
            manager.set_window_title(title)
        self.fig.suptitle(title)

    def update(self, frame_index):
        """Advances physics to the frame index, then refreshes the drawables."""
        self.time_interval = self.fps_record.update()
        if self.fps_record.event:
            self._set_title(f"{self.window_title} - {self.fps_record.fps} fps")

        if not self.physics_frozen:
            try:
                state = self.driver.advance(frame_index)
            except ConvergenceError as e:
                self.physics_frozen = True
                print(f"[ERROR Physics] Integration failed at frame {frame_index}: {e}")
                print("  => Physics is frozen, rendering continues.")
            else:
                self.translation = self.binding.apply(self.translation, state)

        self.p2.set_data_3d(*[[v] for v in self.translation])
        self.line.set_data_3d(*self._line_data())
        self.display_gui(frame_index)
        return self.p2, self.line, self.gui_text

    def display_gui(self, frame_index):
        if self.physics_frozen:
            status = 'frozen'
        else:
            status = self.driver.status
        y = self.driver.state
        self.gui_text.set_text(
            f"frame {frame_index:6d}   t = {self.driver.t:.2f}\n"
            f"position {y[0]: .5f}   velocity {y[1]: .5f}\n"
            f"binding {self.binding.mode}   physics {status}")

    def on_key(self, event):
        # Shift+F toggles full screen, Shift+V prints the camera
        if event.key == 'F':
            self.is_full_screen = not self.is_full_screen
            manager = self.fig.canvas.manager
            if manager is not None:
                manager.full_screen_toggle()
        elif event.key == 'V':
            print(f"\nDebug camera (elev = {self.ax.elev:.2f}, azim = {self.ax.azim:.2f}, roll = {self.ax.roll:.2f})")
            print(f"  Limits x: {self.ax.get_xlim3d()}, y: {self.ax.get_ylim3d()}, z: {self.ax.get_zlim3d()}")

    def on_resize(self, event):
        self.width, self.height = event.width, event.height

    def on_mouse_move(self, event):
        if self.width and self.height:
            self.mouse_position = (2 * event.x / self.width - 1, 2 * event.y / self.height - 1)

    def on_close(self, event):
        print("\nAnimation loop stopped")
        self.driver.close()

    def run(self):
        print("Start animation loop ...")
        self.fps_record.start()
        # Frame index doubles as the target time, starting at 1
        self.animation = FuncAnimation(self.fig, self.update, frames=itertools.count(1),
                                       interval=self.scene_config.get('frame_interval_ms', 16),
                                       blit=False, cache_frame_data=False)
        try:
            plt.show()
        finally:
            self.driver.close()


def check_interactive_backend():
    return plt.get_backend().lower() not in NON_INTERACTIVE_BACKENDS
