"""Deduplication of freshly fetched vehicles against the persisted set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..infra.storage import VehicleStateFile
from ..models import Vehicle


@dataclass(frozen=True, slots=True)
class DeduplicationResult:
    """Outcome of a filter pass.

    ``appended`` is the existing set followed by ``new``; it is what gets
    persisted once the notification went out.
    """

    new: tuple[Vehicle, ...]
    appended: tuple[Vehicle, ...]

    @property
    def has_new(self) -> bool:
        return bool(self.new)


def filter_new(candidates: Iterable[Vehicle], existing: Sequence[Vehicle]) -> DeduplicationResult:
    """Return candidates whose VIN is unseen, in candidate order.

    A candidate accepted earlier in the scan counts as seen for the ones after
    it, so a VIN repeated within ``candidates`` is reported once.
    """

    seen = {vehicle.vin for vehicle in existing}
    new: list[Vehicle] = []
    for vehicle in candidates:
        if vehicle.vin in seen:
            continue
        seen.add(vehicle.vin)
        new.append(vehicle)
    return DeduplicationResult(new=tuple(new), appended=tuple(existing) + tuple(new))


class DeduplicationStore:
    """Load, filter and save against a VIN-keyed state file."""

    def __init__(self, state_file: VehicleStateFile) -> None:
        self.state_file = state_file

    def load(self) -> tuple[Vehicle, ...]:
        return self.state_file.load()

    def filter_new(
        self, candidates: Iterable[Vehicle], existing: Sequence[Vehicle]
    ) -> DeduplicationResult:
        return filter_new(candidates, existing)

    def save(self, vehicles: Iterable[Vehicle]) -> None:
        self.state_file.save(vehicles)


__all__ = ["DeduplicationResult", "DeduplicationStore", "filter_new"]
