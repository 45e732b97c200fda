from datetime import datetime
from unittest.mock import patch

from spiral_catalog.services.cars import CarService
from spiral_catalog.services.errors import StorageError
from spiral_catalog.services.folders import FolderService


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert datetime.fromisoformat(body["timestamp"]).tzinfo is not None


class TestIndexPage:
    """The server-rendered catalog page."""

    def test_empty_catalog(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Fibonacci Car Explorer" in response.text
        assert "No folders to display" in response.text
        assert "No cars found" in response.text
        assert 'id="spiral"' not in response.text

    def test_renders_cards_and_spiral_container(self, client, sample_car):
        client.post("/api/folders", json={"name": "Photos"})
        client.post("/api/cars", json=sample_car)

        response = client.get("/")

        assert 'id="spiral"' in response.text
        assert "Porsche 911 Turbo S" in response.text
        assert "640 HP" in response.text
        assert "Active Aero" in response.text

    def test_sample_folder_numbered_after_existing(self, client):
        client.post("/api/folders", json={"name": "One"})
        client.post("/api/folders", json={"name": "Two"})

        response = client.get("/")

        assert "Folder 3" in response.text

    def test_escapes_record_text(self, client, sample_car):
        client.post("/api/cars", json={**sample_car, "name": "<script>alert(1)</script>"})

        response = client.get("/")

        assert "<script>alert(1)</script>" not in response.text
        assert "&lt;script&gt;" in response.text

    @patch.object(CarService, "list_cars", side_effect=StorageError("boom"))
    def test_car_failure_keeps_folders(self, mock_list, client):
        """A failing cars section does not take the folders section down."""
        client.post("/api/folders", json={"name": "Photos"})

        response = client.get("/")

        assert response.status_code == 200
        assert "Failed to load cars" in response.text
        assert 'id="spiral"' in response.text
        assert "Failed to load folders" not in response.text

    @patch.object(FolderService, "list_folders", side_effect=StorageError("boom"))
    def test_folder_failure_keeps_cars(self, mock_list, client, sample_car):
        client.post("/api/cars", json=sample_car)

        response = client.get("/")

        assert response.status_code == 200
        assert "Failed to load folders" in response.text
        assert "Porsche 911 Turbo S" in response.text

    def test_static_assets(self, client):
        assert client.get("/static/spiral.js").status_code == 200
        assert client.get("/static/app.css").status_code == 200
