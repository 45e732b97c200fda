"""
Scene session for the spiral view.

A `SceneSession` owns everything one rendering of the spiral needs: the
camera, orbit controls, render surface, input listeners and the per-frame
callback. `start()` acquires them for a folder list and `dispose()` releases
all of them, so rebuilding the scene for new data never leaves a stale frame
loop or listener behind.

The session talks to its environment through a `ViewportHost` (a browser
container in the page, `HeadlessViewport` in tests).

This is the Python counterpart of the `SceneSession` in `static/spiral.js`,
which the page runs over three.js; both follow the same start/dispose rules.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol

from spiral_catalog.visualization.camera import VIEWPORT_HEIGHT, PerspectiveCamera
from spiral_catalog.visualization.controls import DAMPING_FACTOR, OrbitControls
from spiral_catalog.visualization.picking import Rect, client_to_ndc, pick_closest
from spiral_catalog.visualization.spiral import SpiralLayout, SpiralNode, layout_spiral

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


@dataclass
class ClickEvent:
    client_x: float
    client_y: float


@dataclass
class RenderSurface:
    width: float
    height: float
    frames: int = 0
    disposed: bool = False

    def set_size(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def render(self, layout: SpiralLayout, camera: PerspectiveCamera) -> None:
        self.frames += 1

    def dispose(self) -> None:
        self.disposed = True


class ViewportHost(Protocol):
    def width(self) -> float: ...

    def bounding_rect(self) -> Rect: ...

    def add_listener(self, event: str, listener: Listener) -> None: ...

    def remove_listener(self, event: str, listener: Listener) -> None: ...

    def attach(self, surface: RenderSurface) -> None: ...

    def detach(self, surface: RenderSurface) -> None: ...

    def request_frame(self, callback: Callable[[], None]) -> int: ...

    def cancel_frame(self, handle: int) -> None: ...

    def open_link(self, url: str) -> None: ...


class SceneSession:
    def __init__(
        self,
        host: ViewportHost,
        height: int = VIEWPORT_HEIGHT,
        damping_factor: float = DAMPING_FACTOR,
    ):
        self.host = host
        self.height = height
        self.damping_factor = damping_factor

        self.layout: Optional[SpiralLayout] = None
        self.camera: Optional[PerspectiveCamera] = None
        self.controls: Optional[OrbitControls] = None
        self.surface: Optional[RenderSurface] = None
        self._listeners: Dict[str, Listener] = {}
        self._frame_handle: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.surface is not None

    def start(self, folders: Iterable[Any]) -> SpiralLayout:
        """
        Build the scene for `folders`, replacing any scene already running.
        """
        if self.active:
            self.dispose()

        width = self.host.width()
        self.layout = layout_spiral(folders)

        self.camera = PerspectiveCamera()
        self.camera.set_aspect(width, self.height)
        self.controls = OrbitControls(self.camera, damping_factor=self.damping_factor)

        self.surface = RenderSurface(width=width, height=self.height)
        self.host.attach(self.surface)

        self._listeners = {"click": self.on_click, "resize": self.on_resize}
        for event, listener in self._listeners.items():
            self.host.add_listener(event, listener)

        self._frame_handle = self.host.request_frame(self._frame)
        logger.debug("Spiral scene started with %d nodes", len(self.layout.nodes))
        return self.layout

    def dispose(self) -> None:
        """Release everything `start()` acquired. Safe to call twice."""
        if self._frame_handle is not None:
            self.host.cancel_frame(self._frame_handle)
            self._frame_handle = None

        for event, listener in self._listeners.items():
            self.host.remove_listener(event, listener)
        self._listeners = {}

        if self.controls is not None:
            self.controls.dispose()
            self.controls = None

        if self.surface is not None:
            self.host.detach(self.surface)
            self.surface.dispose()
            self.surface = None

        self.camera = None
        self.layout = None

    def __enter__(self) -> "SceneSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()

    def _frame(self) -> None:
        if not self.active:
            return
        self.controls.update()
        self.surface.render(self.layout, self.camera)
        self._frame_handle = self.host.request_frame(self._frame)

    def pick(self, client_x: float, client_y: float) -> Optional[SpiralNode]:
        """Return the node under a pointer position, if any."""
        if not self.active:
            return None
        ndc_x, ndc_y = client_to_ndc(client_x, client_y, self.host.bounding_rect())
        hit = pick_closest(self.camera.ray_from_ndc(ndc_x, ndc_y), self.layout.nodes)
        return hit.node if hit else None

    def on_click(self, event: ClickEvent) -> None:
        node = self.pick(event.client_x, event.client_y)
        if node is not None:
            self.host.open_link(node.url)

    def on_resize(self, event: Any = None) -> None:
        if not self.active:
            return
        width = self.host.width()
        self.camera.set_aspect(width, self.height)
        self.surface.set_size(width, self.height)


class HeadlessViewport:
    """
    A `ViewportHost` without a display.

    Frames run only when `run_frames()` is called, and opened links are
    recorded in `opened`.
    """

    def __init__(self, width: float = 800, height: float = VIEWPORT_HEIGHT, left: float = 0, top: float = 0):
        self._width = width
        self.height = height
        self.left = left
        self.top = top
        self.listeners: Dict[str, List[Listener]] = {}
        self.surfaces: List[RenderSurface] = []
        self.opened: List[str] = []
        self._frames: Dict[int, Callable[[], None]] = {}
        self._next_handle = 1

    def width(self) -> float:
        return self._width

    def bounding_rect(self) -> Rect:
        return Rect(left=self.left, top=self.top, width=self._width, height=self.height)

    def add_listener(self, event: str, listener: Listener) -> None:
        self.listeners.setdefault(event, []).append(listener)

    def remove_listener(self, event: str, listener: Listener) -> None:
        registered = self.listeners.get(event, [])
        if listener in registered:
            registered.remove(listener)

    def attach(self, surface: RenderSurface) -> None:
        self.surfaces.append(surface)

    def detach(self, surface: RenderSurface) -> None:
        self.surfaces.remove(surface)

    def request_frame(self, callback: Callable[[], None]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._frames[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._frames.pop(handle, None)

    def open_link(self, url: str) -> None:
        self.opened.append(url)

    @property
    def pending_frames(self) -> int:
        return len(self._frames)

    def run_frames(self, count: int = 1) -> None:
        for _ in range(count):
            callbacks = list(self._frames.values())
            self._frames.clear()
            for callback in callbacks:
                callback()

    def dispatch(self, event: str, payload: Any = None) -> None:
        for listener in list(self.listeners.get(event, [])):
            listener(payload)

    def resize(self, width: float) -> None:
        self._width = width
        self.dispatch("resize")
