"""Run the catalog server: ``python -m spiral_catalog`` or ``spiral-catalog``."""

import uvicorn

from spiral_catalog.config import Settings


def main() -> None:
    settings = Settings.from_env()
    uvicorn.run(
        "spiral_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
