"""View models for the car card grid."""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Union

EMPTY_MESSAGE = "No cars found. Add some cars to see them here!"


@dataclass(frozen=True)
class CarCard:
    key: int
    title: str
    year: int
    engine: str
    horsepower: str
    features: List[str] = field(default_factory=list)

    @property
    def has_features(self) -> bool:
        return bool(self.features)


def _get(car: Union[Mapping[str, Any], Any], name: str) -> Any:
    if isinstance(car, Mapping):
        return car[name]
    return getattr(car, name)


def build_cards(cars: Iterable[Union[Mapping[str, Any], Any]]) -> List[CarCard]:
    """Turn car records (or their JSON dicts) into cards, keeping their order."""
    return [
        CarCard(
            key=_get(car, "id"),
            title=_get(car, "name"),
            year=_get(car, "year"),
            engine=_get(car, "engine"),
            horsepower=f"{_get(car, 'hp')} HP",
            features=list(_get(car, "features") or []),
        )
        for car in cars
    ]
