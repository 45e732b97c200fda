"""
Closest-hit picking of spiral nodes.

Mirrors the three.js `Raycaster` use in `static/spiral.js`: a click is
converted to NDC, cast as a ray, and the nearest sphere it hits wins.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from spiral_catalog.visualization.camera import Ray
from spiral_catalog.visualization.spiral import NODE_RADIUS, SpiralNode


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class Hit:
    node: SpiralNode
    distance: float


def client_to_ndc(client_x: float, client_y: float, rect: Rect):
    """Convert a pointer position inside `rect` to normalized device coordinates."""
    ndc_x = ((client_x - rect.left) / rect.width) * 2 - 1
    ndc_y = -((client_y - rect.top) / rect.height) * 2 + 1
    return ndc_x, ndc_y


def intersect_sphere(ray: Ray, center, radius: float) -> Optional[float]:
    """
    Distance along `ray` to the first point on the sphere, or None on a miss.

    A ray starting inside the sphere hits its far side.
    """
    oc = ray.origin - np.asarray(center, dtype=float)
    b = float(np.dot(oc, ray.direction))
    c = float(np.dot(oc, oc)) - radius * radius
    disc = b * b - c
    if disc < 0:
        return None

    root = math.sqrt(disc)
    near = -b - root
    if near >= 0:
        return near
    far = -b + root
    return far if far >= 0 else None


def pick_closest(
    ray: Ray, nodes: Iterable[SpiralNode], radius: float = NODE_RADIUS
) -> Optional[Hit]:
    """
    Return the node whose sphere the ray hits first.

    Equal distances resolve to the node with the lower index.
    """
    best: Optional[Hit] = None
    for node in nodes:
        distance = intersect_sphere(ray, node.position, radius)
        if distance is None:
            continue
        if best is None or distance < best.distance:
            best = Hit(node=node, distance=distance)
    return best
