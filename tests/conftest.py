import pytest
from fastapi.testclient import TestClient

from spiral_catalog.config import Settings
from spiral_catalog.main import create_app
from spiral_catalog.services.database import DatabaseService


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    return Settings(database_url=f"sqlite:///{tmp_path / 'catalog.db'}", log_level="WARNING")


@pytest.fixture
def client(settings):
    """Test client with the app lifespan (database open) running."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def database(settings, anyio_backend):
    """An initialised DatabaseService for direct service tests."""
    db = DatabaseService(settings.database_url)
    await db.create_db_and_tables()
    yield db
    await db.teardown()


@pytest.fixture
def sample_car():
    return {
        "name": "Porsche 911 Turbo S",
        "year": 2023,
        "engine": "3.7L Twin-Turbo Flat-6",
        "hp": 640,
        "features": ["AWD", "Active Aero", "Sport Exhaust"],
    }
