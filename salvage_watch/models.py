"""Vehicle listing record shared by every pipeline stage."""

from __future__ import annotations

import json
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field


class Vehicle(BaseModel):
    """A single salvage-yard listing.

    Every attribute is plain text. The aliases are the keys used in the
    persisted state file and in notification bodies, so files written by
    earlier runs keep loading unchanged.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    make: str = Field(default="", alias="Make")
    model: str = Field(default="", alias="Model")
    year: str = Field(default="", alias="Year")
    vin: str = Field(default="", alias="VIN")
    color: str = Field(default="", alias="Color")
    mileage: str = Field(default="", alias="Mileage")
    engine_size: str = Field(default="", alias="EngineSize")
    row: str = Field(default="", alias="Row")
    vehicle_number: str = Field(default="", alias="VehicleNumber")
    description: str = Field(default="", alias="Description")
    site: str = Field(default="", alias="Site")

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


def dump_vehicles(vehicles: Iterable[Vehicle], indent: int | None = None) -> str:
    """Serialise vehicles to a JSON array using the persisted keys."""

    return json.dumps([v.to_payload() for v in vehicles], indent=indent, ensure_ascii=False)


__all__ = ["Vehicle", "dump_vehicles"]
