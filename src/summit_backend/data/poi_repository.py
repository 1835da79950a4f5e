"""In-memory POI store, built once from a fixed seed list."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from ..models.domain import PoiRecord

logger = logging.getLogger(__name__)

SUMMIT_POI_SEED: tuple[tuple[str, str, tuple[float, float]], ...] = (
    ("Red Hat Headquarters", "Raleigh,NC,USA", (35.787743, -78.644257)),
    ("Red Hat Summit", "Bosten,MA,USA", (42.361145, -71.057083)),
)


class PoiNotFoundError(LookupError):
    """Raised when a POI index falls outside the store."""

    def __init__(self, poi_id: int) -> None:
        self.poi_id = poi_id
        super().__init__(f"no data point with id {poi_id} found")


class PoiStore:
    """Read-only ordered collection of POI records addressed by zero-based index."""

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[PoiRecord] = ()) -> None:
        self._records: tuple[PoiRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PoiRecord]:
        return iter(self._records)

    def list_all(self) -> tuple[PoiRecord, ...]:
        return self._records

    def get_by_index(self, poi_id: int) -> PoiRecord:
        # Negative indices must not wrap around to the end of the tuple.
        if poi_id < 0 or poi_id >= len(self._records):
            raise PoiNotFoundError(poi_id)
        return self._records[poi_id]


def build_poi_store(
    seed: Sequence[tuple[str, str, Sequence[float]]] = SUMMIT_POI_SEED,
) -> PoiStore:
    """Create the store from ``(name, location label, (lat, lon))`` rows, keeping their order."""
    records = [
        PoiRecord(
            name=name,
            location_label=location_label,
            coordinate=(float(coordinate[0]), float(coordinate[1])),
        )
        for name, location_label, coordinate in seed
    ]
    store = PoiStore(records)
    logger.info("Initialized POI store with %d records", len(store))
    return store
