"""JSON state file holding every vehicle seen so far."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from ..errors import PersistenceError
from ..models import Vehicle, dump_vehicles


class VehicleStateFile:
    """Read and fully rewrite the persisted vehicle list."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> tuple[Vehicle, ...]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ()
        except OSError as exc:
            raise PersistenceError(f"unable to read {self.path}: {exc}", stage="load") from exc

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"corrupt state file {self.path}: {exc}", stage="load") from exc
        if not isinstance(payload, list):
            raise PersistenceError(f"state file {self.path} is not an array", stage="load")
        try:
            return tuple(Vehicle.model_validate(item) for item in payload)
        except ValidationError as exc:
            raise PersistenceError(f"corrupt record in {self.path}: {exc}", stage="load") from exc

    def save(self, vehicles: Iterable[Vehicle]) -> None:
        body = dump_vehicles(vehicles) + "\n"
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(body, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise PersistenceError(f"unable to write {self.path}: {exc}", stage="save") from exc


__all__ = ["VehicleStateFile"]
