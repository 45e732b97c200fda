from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from spiral_catalog.deps import get_car_service, get_folder_service
from spiral_catalog.services.cars import CarService
from spiral_catalog.services.folders import FolderService
from spiral_catalog.ui.cards import EMPTY_MESSAGE
from spiral_catalog.ui.shell import load_shell

router = APIRouter(include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    folder_service: FolderService = Depends(get_folder_service),
    car_service: CarService = Depends(get_car_service),
):
    """
    Serve the catalog page with both sections rendered server-side.

    The spiral itself is drawn in the browser from /api/folders/spiral.
    """
    shell = await load_shell(folder_service, car_service)
    return request.app.state.templates.TemplateResponse(
        request,
        "index.html",
        {"shell": shell, "empty_cars_message": EMPTY_MESSAGE},
    )
