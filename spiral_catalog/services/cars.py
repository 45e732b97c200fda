"""Car persistence."""

import logging
from typing import List

from sqlmodel import select

from spiral_catalog.models.records import Car
from spiral_catalog.models.schemas import CarCreate, CarUpdate
from spiral_catalog.services.database import DatabaseService
from spiral_catalog.services.errors import DATABASE_ERRORS, NotFoundError, StorageError

logger = logging.getLogger(__name__)


class CarService:
    def __init__(self, database: DatabaseService):
        self.database = database

    async def list_cars(self) -> List[Car]:
        try:
            async with self.database.session() as session:
                result = await session.exec(select(Car).order_by(Car.name))
                return list(result.all())
        except DATABASE_ERRORS as e:
            raise StorageError("Failed to fetch cars") from e

    async def get_car(self, car_id: int) -> Car:
        try:
            async with self.database.session() as session:
                car = await session.get(Car, car_id)
        except DATABASE_ERRORS as e:
            raise StorageError("Failed to fetch car") from e

        if car is None:
            raise NotFoundError("Car", car_id)
        return car

    async def create_car(self, data: CarCreate) -> Car:
        car = Car(**data.model_dump())
        try:
            async with self.database.session() as session:
                session.add(car)
                await session.commit()
                await session.refresh(car)
        except DATABASE_ERRORS as e:
            raise StorageError("Failed to create car") from e

        logger.info("Created car %s (%r)", car.id, car.name)
        return car

    async def update_car(self, car_id: int, data: CarUpdate) -> Car:
        """
        Apply a partial update to a car.

        Only the fields present in `data` are written; everything else keeps
        its stored value.

        Raises:
            NotFoundError: No car has this id
            StorageError: The database reported a failure
        """
        try:
            async with self.database.session() as session:
                car = await session.get(Car, car_id)
                if car is None:
                    raise NotFoundError("Car", car_id)

                for field, value in data.changes().items():
                    setattr(car, field, value)
                session.add(car)
                await session.commit()
                await session.refresh(car)
        except DATABASE_ERRORS as e:
            raise StorageError("Failed to update car") from e
        return car

    async def delete_car(self, car_id: int) -> None:
        try:
            async with self.database.session() as session:
                car = await session.get(Car, car_id)
                if car is None:
                    raise NotFoundError("Car", car_id)
                await session.delete(car)
                await session.commit()
        except DATABASE_ERRORS as e:
            raise StorageError("Failed to delete car") from e

        logger.info("Deleted car %s", car_id)
