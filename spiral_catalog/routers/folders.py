import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from spiral_catalog.deps import get_folder_service
from spiral_catalog.models.schemas import (
    FolderCreate,
    FolderResponse,
    SpiralCameraResponse,
    SpiralLayoutResponse,
    SpiralNodeResponse,
)
from spiral_catalog.services.errors import NotFoundError, StorageError
from spiral_catalog.services.folders import FolderService
from spiral_catalog.utils import parse_id
from spiral_catalog.visualization.camera import (
    CAMERA_DISTANCE,
    DEFAULT_FAR,
    DEFAULT_FOV,
    DEFAULT_NEAR,
    VIEWPORT_HEIGHT,
)
from spiral_catalog.visualization.controls import DAMPING_FACTOR
from spiral_catalog.visualization.spiral import NODE_RADIUS, layout_spiral

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/folders", tags=["folders"])


@router.get("", response_model=List[FolderResponse])
async def get_folders(service: FolderService = Depends(get_folder_service)):
    """
    List all folders, ordered by name.
    """
    try:
        folders = await service.list_folders()
    except StorageError:
        logger.exception("Error fetching folders")
        raise HTTPException(status_code=500, detail="Failed to fetch folders")
    return [FolderResponse.from_record(f) for f in folders]


@router.post("", response_model=FolderResponse, status_code=status.HTTP_201_CREATED)
async def create_folder(folder: FolderCreate, service: FolderService = Depends(get_folder_service)):
    """
    Create a folder. The view counter always starts at zero.
    """
    try:
        created = await service.create_folder(folder)
    except StorageError:
        logger.exception("Error creating folder")
        raise HTTPException(status_code=500, detail="Failed to create folder")
    return FolderResponse.from_record(created)


@router.get("/spiral", response_model=SpiralLayoutResponse)
async def get_spiral(service: FolderService = Depends(get_folder_service)):
    """
    Spiral placement of the folder list, plus the camera settings the page
    uses to render it.
    """
    try:
        folders = await service.list_folders()
    except StorageError:
        logger.exception("Error fetching folders for spiral")
        raise HTTPException(status_code=500, detail="Failed to fetch folders")

    layout = layout_spiral(folders)
    return SpiralLayoutResponse(
        nodeRadius=NODE_RADIUS,
        nodes=[
            SpiralNodeResponse(id=n.folder_id, name=n.name, url=n.url, position=n.position)
            for n in layout.nodes
        ],
        segments=layout.segments,
        camera=SpiralCameraResponse(
            fov=DEFAULT_FOV,
            near=DEFAULT_NEAR,
            far=DEFAULT_FAR,
            distance=CAMERA_DISTANCE,
            height=VIEWPORT_HEIGHT,
            dampingFactor=DAMPING_FACTOR,
        ),
    )


@router.post("/{folder_id}/view", response_model=FolderResponse)
async def increment_view(folder_id: str, service: FolderService = Depends(get_folder_service)):
    """
    Count one view of a folder.
    """
    try:
        parsed_id = parse_id(folder_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid folder ID")

    try:
        folder = await service.increment_views(parsed_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Folder not found")
    except StorageError:
        logger.exception("Error incrementing view count")
        raise HTTPException(status_code=500, detail="Failed to update view count")
    return FolderResponse.from_record(folder)
