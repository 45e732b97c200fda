import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, select_autoescape

from spiral_catalog import __version__
from spiral_catalog.config import Settings
from spiral_catalog.logging_config import setup_logging
from spiral_catalog.routers import api, pages
from spiral_catalog.services.cars import CarService
from spiral_catalog.services.database import DatabaseService
from spiral_catalog.services.folders import FolderService

logger = logging.getLogger(__name__)

_HERE = Path(__file__).parent
_TEMPLATES_DIR = _HERE / "templates"
_STATIC_DIR = _HERE / "static"


def _validation_message(exc: RequestValidationError) -> str:
    fields = []
    for error in exc.errors():
        # loc looks like ("body", "name"); the first entry is the request part
        loc = [str(part) for part in error.get("loc", ())[1:]]
        fields.append(".".join(loc) or "body")
    return "Invalid or missing fields: " + ", ".join(dict.fromkeys(fields))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _validation_message(exc)},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application for the given settings (defaults: environment).

    The database handle is opened in the lifespan, shared by the folder and
    car services through app.state, and disposed on shutdown.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = DatabaseService(settings.database_url)
        await database.create_db_and_tables()
        app.state.database = database
        app.state.folder_service = FolderService(database)
        app.state.car_service = CarService(database)
        try:
            yield
        finally:
            await database.teardown()

    app = FastAPI(
        title="Spiral Catalog",
        description="Folder and car catalog with a 3D spiral view of the folders",
        version=__version__,
        lifespan=lifespan,
    )

    # Development reloads templates on every request; production caches them
    app.state.templates = Jinja2Templates(
        env=Environment(
            loader=FileSystemLoader(str(_TEMPLATES_DIR)),
            autoescape=select_autoescape(),
            auto_reload=not settings.is_production,
        )
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.is_production:
        app.add_middleware(GZipMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(api.router)
    app.include_router(pages.router)
    app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")

    logger.info("Spiral Catalog %s configured (%s)", __version__, settings.environment)
    return app


app = create_app()
