# Read-only vehicle catalog loaded from a cars.json list; lookups by "brand model", case-insensitive.

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from .errors import CatalogLookupError
from .models import VehicleProfile

log = logging.getLogger(__name__)


class VehicleCatalog:
    def __init__(self, vehicles: Iterable[VehicleProfile]):
        self.vehicles: List[VehicleProfile] = list(vehicles)
        self._by_key: Dict[str, VehicleProfile] = {}
        for v in self.vehicles:
            self._by_key.setdefault(v.key, v)       # first entry wins on duplicate keys

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "VehicleCatalog":
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
        vehicles: List[VehicleProfile] = []
        for item in raw:
            try:
                vehicles.append(VehicleProfile.model_validate(item))
            except ValidationError as e:
                log.warning("Skipping catalog entry %r: %s", item, e.errors()[0].get("msg"))
        log.info("Loaded %d vehicles from %s", len(vehicles), path)
        return cls(vehicles)

    def find(self, key: str) -> Optional[VehicleProfile]:
        return self._by_key.get(" ".join((key or "").split()).lower())

    def get(self, key: str) -> VehicleProfile:
        v = self.find(key)
        if v is None:
            raise CatalogLookupError(f"Vehicle {key!r} not found in catalog")
        return v

    def __len__(self) -> int:
        return len(self.vehicles)

    def __iter__(self):
        return iter(self.vehicles)
