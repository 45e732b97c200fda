from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from spiral_catalog.models.records import Car, Folder

# --- Folders ---


class FolderCreate(BaseModel):
    name: str = Field(min_length=1)
    isPrivate: bool = False
    url: Optional[str] = None

    @field_validator("isPrivate", mode="before")
    @classmethod
    def coerce_private(cls, value: Any) -> bool:
        # Only a real True or the literal "true" mark a folder private
        return value is True or value == "true"


class FolderResponse(BaseModel):
    id: int
    name: str
    url: Optional[str] = None
    views: int
    isPrivate: bool
    createdAt: datetime

    @classmethod
    def from_record(cls, folder: Folder) -> "FolderResponse":
        return cls(
            id=folder.id,
            name=folder.name,
            url=folder.url,
            views=folder.views,
            isPrivate=folder.is_private,
            createdAt=folder.created_at,
        )

    @field_serializer("createdAt")
    def serialize_created_at(self, value: datetime) -> str:
        # SQLite hands timestamps back without their offset; they were stored in UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()


# --- Cars ---


class CarCreate(BaseModel):
    name: str = Field(min_length=1)
    year: int
    engine: str = Field(min_length=1)
    hp: int
    features: List[str] = []

    @field_validator("features", mode="before")
    @classmethod
    def features_or_empty(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []


class CarUpdate(BaseModel):
    """
    Partial update for a car.

    Fields left out of the request (or sent as null) keep their stored value.
    Any string, including an empty one, replaces the stored one.
    `features` only replaces the stored list when the input is a list.
    """

    name: Optional[str] = None
    year: Optional[int] = None
    engine: Optional[str] = None
    hp: Optional[int] = None
    features: Optional[List[str]] = None

    @field_validator("features", mode="before")
    @classmethod
    def features_or_untouched(cls, value: Any) -> Any:
        return value if isinstance(value, list) else None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class CarResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    year: int
    engine: str
    hp: int
    features: List[str] = []

    @classmethod
    def from_record(cls, car: Car) -> "CarResponse":
        return cls.model_validate(car)


# --- Spiral layout ---


class SpiralNodeResponse(BaseModel):
    id: int
    name: str
    url: str
    position: Tuple[float, float, float]


class SpiralCameraResponse(BaseModel):
    fov: float
    near: float
    far: float
    distance: float
    height: int
    dampingFactor: float


class SpiralLayoutResponse(BaseModel):
    nodeRadius: float
    nodes: List[SpiralNodeResponse]
    segments: List[Tuple[Tuple[float, float, float], Tuple[float, float, float]]]
    camera: SpiralCameraResponse
