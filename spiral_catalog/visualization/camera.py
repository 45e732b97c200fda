"""Perspective camera model and ray casting through it."""

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

DEFAULT_FOV = 75.0
DEFAULT_NEAR = 0.1
DEFAULT_FAR = 1000.0
CAMERA_DISTANCE = 10.0
VIEWPORT_HEIGHT = 600

WORLD_UP = np.array([0.0, 1.0, 0.0])


@dataclass
class Ray:
    origin: np.ndarray
    direction: np.ndarray  # unit length

    def at(self, distance: float) -> np.ndarray:
        return self.origin + distance * self.direction


class PerspectiveCamera:
    """
    A pinhole camera looking from `position` towards `target`.

    `fov` is the vertical field of view in degrees.
    """

    def __init__(
        self,
        fov: float = DEFAULT_FOV,
        aspect: float = 1.0,
        near: float = DEFAULT_NEAR,
        far: float = DEFAULT_FAR,
    ):
        self.fov = fov
        self.aspect = aspect
        self.near = near
        self.far = far
        self.position = np.array([0.0, 0.0, CAMERA_DISTANCE])
        self.target = np.zeros(3)

    def set_aspect(self, width: float, height: float) -> None:
        self.aspect = width / height if height else 1.0

    def look_at(self, target: Sequence[float]) -> None:
        self.target = np.asarray(target, dtype=float)

    def basis(self):
        """Return the (right, up, forward) unit vectors of the camera."""
        forward = self.target - self.position
        forward = forward / np.linalg.norm(forward)
        right = np.cross(forward, WORLD_UP)
        if np.linalg.norm(right) < 1e-9:
            # Looking straight up or down
            right = np.array([1.0, 0.0, 0.0])
        right = right / np.linalg.norm(right)
        up = np.cross(right, forward)
        return right, up, forward

    def ray_from_ndc(self, ndc_x: float, ndc_y: float) -> Ray:
        """
        Build the ray leaving the camera through a point on the screen.

        Args:
            ndc_x: Horizontal normalized device coordinate in [-1, 1]
            ndc_y: Vertical normalized device coordinate in [-1, 1], up positive
        """
        right, up, forward = self.basis()
        half_height = math.tan(math.radians(self.fov) / 2)
        half_width = half_height * self.aspect

        direction = forward + ndc_x * half_width * right + ndc_y * half_height * up
        direction = direction / np.linalg.norm(direction)
        return Ray(origin=self.position.copy(), direction=direction)
