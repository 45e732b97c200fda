"""FastAPI dependencies that hand out the services built at startup."""

from fastapi import Request

from spiral_catalog.services.cars import CarService
from spiral_catalog.services.folders import FolderService


def get_folder_service(request: Request) -> FolderService:
    return request.app.state.folder_service


def get_car_service(request: Request) -> CarService:
    return request.app.state.car_service
