"""
Golden-angle spiral placement of folder nodes.

Node i sits at angle ``i * GOLDEN_ANGLE`` and radius
``RADIUS_SCALE * sqrt(i + 1)``, and is pushed ``i * Z_STEP`` forward in depth,
which turns the flat sunflower pattern into a rising spiral. Positions depend
on the index only, so moving one folder in the input list moves every node
after it as well.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

GOLDEN_RATIO = 1.61803398875
GOLDEN_ANGLE = 2 * math.pi * (1 - 1 / GOLDEN_RATIO)

RADIUS_SCALE = 0.5
Z_STEP = 0.1
NODE_RADIUS = 0.2

FALLBACK_URL_TEMPLATE = "https://example.com/folder/{id}"

Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class SpiralNode:
    index: int
    folder_id: int
    name: str
    url: str
    position: Vec3

    @property
    def radius(self) -> float:
        """Distance from the spiral axis."""
        return math.hypot(self.position[0], self.position[1])


@dataclass(frozen=True)
class SpiralLayout:
    nodes: List[SpiralNode]
    segments: List[Tuple[Vec3, Vec3]]


def fallback_url(folder_id: int) -> str:
    return FALLBACK_URL_TEMPLATE.format(id=folder_id)


def spiral_position(index: int) -> Vec3:
    theta = index * GOLDEN_ANGLE
    radius = RADIUS_SCALE * math.sqrt(index + 1)
    return (radius * math.cos(theta), radius * math.sin(theta), index * Z_STEP)


def _field(folder: Union[Mapping[str, Any], Any], name: str) -> Any:
    if isinstance(folder, Mapping):
        return folder.get(name)
    return getattr(folder, name, None)


def layout_spiral(folders: Iterable[Union[Mapping[str, Any], Any]]) -> SpiralLayout:
    """
    Place folders along the spiral in the order given.

    Args:
        folders: Folder records or dicts; only ``id``, ``name`` and ``url``
            are read

    Returns:
        The nodes in input order and the segments joining consecutive nodes
    """
    nodes: List[SpiralNode] = []
    for i, folder in enumerate(folders):
        folder_id = _field(folder, "id")
        url: Optional[str] = _field(folder, "url")
        nodes.append(
            SpiralNode(
                index=i,
                folder_id=folder_id,
                name=_field(folder, "name"),
                url=url or fallback_url(folder_id),
                position=spiral_position(i),
            )
        )

    segments = [(prev.position, node.position) for prev, node in zip(nodes, nodes[1:])]
    return SpiralLayout(nodes=nodes, segments=segments)
