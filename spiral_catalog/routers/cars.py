import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from spiral_catalog.deps import get_car_service
from spiral_catalog.models.schemas import CarCreate, CarResponse, CarUpdate
from spiral_catalog.services.cars import CarService
from spiral_catalog.services.errors import NotFoundError, StorageError
from spiral_catalog.utils import parse_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cars", tags=["cars"])


def _car_id(car_id: str) -> int:
    try:
        return parse_id(car_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid car ID")


@router.get("", response_model=List[CarResponse])
async def get_cars(service: CarService = Depends(get_car_service)):
    """
    List all cars, ordered by name.
    """
    try:
        cars = await service.list_cars()
    except StorageError:
        logger.exception("Error fetching cars")
        raise HTTPException(status_code=500, detail="Failed to fetch cars")
    return [CarResponse.from_record(c) for c in cars]


@router.get("/{car_id}", response_model=CarResponse)
async def get_car(car_id: str, service: CarService = Depends(get_car_service)):
    parsed_id = _car_id(car_id)
    try:
        car = await service.get_car(parsed_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Car not found")
    except StorageError:
        logger.exception("Error fetching car %s", parsed_id)
        raise HTTPException(status_code=500, detail="Failed to fetch car")
    return CarResponse.from_record(car)


@router.post("", response_model=CarResponse, status_code=status.HTTP_201_CREATED)
async def create_car(car: CarCreate, service: CarService = Depends(get_car_service)):
    """
    Create a car. Year and horsepower may be sent as numeric strings.
    """
    try:
        created = await service.create_car(car)
    except StorageError:
        logger.exception("Error creating car")
        raise HTTPException(status_code=500, detail="Failed to create car")
    return CarResponse.from_record(created)


@router.put("/{car_id}", response_model=CarResponse)
async def update_car(car_id: str, changes: CarUpdate, service: CarService = Depends(get_car_service)):
    """
    Update the fields present in the body; the others keep their stored value.
    """
    parsed_id = _car_id(car_id)
    try:
        car = await service.update_car(parsed_id, changes)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Car not found")
    except StorageError:
        logger.exception("Error updating car %s", parsed_id)
        raise HTTPException(status_code=500, detail="Failed to update car")
    return CarResponse.from_record(car)


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_car(car_id: str, service: CarService = Depends(get_car_service)):
    parsed_id = _car_id(car_id)
    try:
        await service.delete_car(parsed_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Car not found")
    except StorageError:
        logger.exception("Error deleting car %s", parsed_id)
        raise HTTPException(status_code=500, detail="Failed to delete car")
    return None
