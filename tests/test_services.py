"""Direct tests of the services against a real SQLite database."""

import asyncio
from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError

from spiral_catalog.models.schemas import CarCreate, CarUpdate, FolderCreate
from spiral_catalog.services.cars import CarService
from spiral_catalog.services.database import async_database_url
from spiral_catalog.services.errors import NotFoundError, StorageError
from spiral_catalog.services.folders import FolderService


@pytest.mark.anyio
class TestFolderService:
    async def test_create_and_list(self, database):
        service = FolderService(database)
        await service.create_folder(FolderCreate(name="b"))
        created = await service.create_folder(FolderCreate(name="a", isPrivate="true"))

        assert created.id is not None
        assert created.is_private is True
        assert created.created_at is not None
        assert [f.name for f in await service.list_folders()] == ["a", "b"]

    async def test_concurrent_increments_are_not_lost(self, database):
        service = FolderService(database)
        folder = await service.create_folder(FolderCreate(name="busy"))

        await asyncio.gather(*(service.increment_views(folder.id) for _ in range(5)))

        [stored] = await service.list_folders()
        assert stored.views == 5

    async def test_increment_unknown(self, database):
        with pytest.raises(NotFoundError):
            await FolderService(database).increment_views(123)

    async def test_sqlalchemy_errors_become_storage_errors(self, database):
        service = FolderService(database)
        with patch.object(
            type(database), "session", side_effect=IntegrityError("INSERT", {}, Exception("unique"))
        ):
            with pytest.raises(StorageError) as exc_info:
                await service.create_folder(FolderCreate(name="x"))

        assert isinstance(exc_info.value.__cause__, IntegrityError)


@pytest.mark.anyio
class TestCarService:
    async def test_partial_update(self, database):
        service = CarService(database)
        car = await service.create_car(
            CarCreate(name="Supra", year="1998", engine="2JZ", hp="320", features=["Targa"])
        )

        updated = await service.update_car(car.id, CarUpdate(hp=500))

        assert updated.hp == 500
        assert (updated.name, updated.year, updated.engine, updated.features) == (
            "Supra",
            1998,
            "2JZ",
            ["Targa"],
        )

    async def test_delete(self, database):
        service = CarService(database)
        car = await service.create_car(CarCreate(name="Golf", year=2019, engine="TSI", hp=150))

        await service.delete_car(car.id)

        with pytest.raises(NotFoundError):
            await service.get_car(car.id)
        with pytest.raises(NotFoundError):
            await service.delete_car(car.id)


class TestDatabaseUrl:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("sqlite:///./x.db", "sqlite+aiosqlite:///./x.db"),
            ("postgres://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
            ("postgresql://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
            ("sqlite+aiosqlite:///x.db", "sqlite+aiosqlite:///x.db"),
        ],
    )
    def test_async_driver(self, url, expected):
        assert async_database_url(url) == expected

    def test_invalid(self):
        with pytest.raises(ValueError):
            async_database_url("not-a-url")
