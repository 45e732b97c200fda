"""Damped orbit controls for the spiral camera."""

import math

import numpy as np

from spiral_catalog.visualization.camera import PerspectiveCamera

DAMPING_FACTOR = 0.05
ROTATE_SPEED = 1.0

_EPS = 1e-6
_MIN_PHI = _EPS
_MAX_PHI = math.pi - _EPS


class OrbitControls:
    """
    Orbit a camera around its target.

    Drag input does not move the camera directly: it adds to a pending
    rotation (and zoom) that each `update()` applies a `damping_factor`
    fraction of and then shrinks by the same fraction. The camera keeps
    easing for a while after input stops, until the pending motion decays.
    """

    def __init__(self, camera: PerspectiveCamera, damping_factor: float = DAMPING_FACTOR):
        self.camera = camera
        self.damping_factor = damping_factor
        self.enabled = True
        self._delta_theta = 0.0
        self._delta_phi = 0.0
        self._scale = 1.0

    def rotate(self, delta_x: float, delta_y: float, viewport_height: float) -> None:
        """
        Queue a rotation from a pointer drag of (delta_x, delta_y) pixels.

        A drag across the full viewport height turns the camera a full circle.
        """
        if not self.enabled:
            return
        self._delta_theta -= 2 * math.pi * delta_x / viewport_height * ROTATE_SPEED
        self._delta_phi -= 2 * math.pi * delta_y / viewport_height * ROTATE_SPEED

    def dolly(self, scale: float) -> None:
        """Queue a zoom; scale < 1 moves towards the target."""
        if self.enabled:
            self._scale *= scale

    @property
    def is_settled(self) -> bool:
        return abs(self._delta_theta) < _EPS and abs(self._delta_phi) < _EPS

    def update(self) -> bool:
        """
        Advance the camera by one frame.

        Returns:
            True if the camera moved
        """
        offset = self.camera.position - self.camera.target
        radius = float(np.linalg.norm(offset))
        theta = math.atan2(offset[0], offset[2])
        phi = math.acos(min(max(offset[1] / radius, -1.0), 1.0))

        theta += self._delta_theta * self.damping_factor
        phi += self._delta_phi * self.damping_factor
        phi = min(max(phi, _MIN_PHI), _MAX_PHI)
        radius *= self._scale

        sin_phi = math.sin(phi)
        new_offset = np.array(
            [radius * sin_phi * math.sin(theta), radius * math.cos(phi), radius * sin_phi * math.cos(theta)]
        )
        moved = bool(np.linalg.norm(new_offset - offset) > _EPS)
        self.camera.position = self.camera.target + new_offset

        self._delta_theta *= 1 - self.damping_factor
        self._delta_phi *= 1 - self.damping_factor
        self._scale = 1.0
        return moved

    def dispose(self) -> None:
        self.enabled = False
        self._delta_theta = 0.0
        self._delta_phi = 0.0
        self._scale = 1.0
