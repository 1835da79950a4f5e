"""Domain models for the backend descriptor and POI records."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Latitude/longitude pair. Any two numbers are accepted."""

    lat: float
    lon: float


@dataclass(frozen=True, slots=True)
class Backend:
    """Identity of the running backend instance."""

    id: str
    display_name: str
    location: Coordinates
    weight: int


@dataclass(frozen=True, slots=True)
class PoiRecord:
    """A named point of interest with a free-text place label."""

    name: str
    location_label: str
    coordinate: tuple[float, float]
