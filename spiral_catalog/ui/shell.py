"""
Page state for the catalog shell.

The folders and cars sections load independently: a storage failure in one
section replaces only that section's content with a message and never stops
the other from rendering.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List

from spiral_catalog.services.cars import CarService
from spiral_catalog.services.errors import StorageError
from spiral_catalog.services.folders import FolderService
from spiral_catalog.ui.cards import CarCard, build_cards

logger = logging.getLogger(__name__)

SAMPLE_CARS: List[Dict[str, Any]] = [
    {
        "name": "Tesla Model S",
        "year": 2023,
        "engine": "Electric",
        "hp": 1020,
        "features": ["Autopilot", "Ludicrous Mode", "Glass Roof"],
    },
    {
        "name": "Porsche 911 Turbo S",
        "year": 2023,
        "engine": "3.7L Twin-Turbo Flat-6",
        "hp": 640,
        "features": ["AWD", "Active Aero", "Sport Exhaust"],
    },
    {
        "name": "Ferrari SF90 Stradale",
        "year": 2023,
        "engine": "4.0L Twin-Turbo V8 + 3 Electric Motors",
        "hp": 986,
        "features": ["Hybrid", "AWD", "E-Diff"],
    },
]


def sample_folder(existing_count: int) -> Dict[str, Any]:
    """Body for the "Add Sample Folder" action, numbered after the existing folders."""
    n = existing_count + 1
    return {"name": f"Folder {n}", "url": f"https://example.com/folder-{n}", "isPrivate": False}


@dataclass
class Section:
    items: List[Any] = field(default_factory=list)
    error: str = ""

    @property
    def failed(self) -> bool:
        return bool(self.error)


@dataclass
class ShellState:
    folders: Section
    cars: Section
    cards: List[CarCard]
    next_sample_folder: Dict[str, Any]
    sample_cars: List[Dict[str, Any]] = field(default_factory=lambda: SAMPLE_CARS)


async def _load(loader: Callable[[], Awaitable[List[Any]]], error_message: str) -> Section:
    try:
        return Section(items=await loader())
    except StorageError:
        logger.exception(error_message)
        return Section(error=error_message)


async def load_shell(folder_service: FolderService, car_service: CarService) -> ShellState:
    folders, cars = await asyncio.gather(
        _load(folder_service.list_folders, "Failed to load folders"),
        _load(car_service.list_cars, "Failed to load cars"),
    )
    return ShellState(
        folders=folders,
        cars=cars,
        cards=build_cards(cars.items),
        next_sample_folder=sample_folder(len(folders.items)),
    )
