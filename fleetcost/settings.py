# Process settings read from the environment:
#   FLEETCOST_DATA_DIR   directory holding all-trips.json / last-trip.json (default ./data)
#   FLEETCOST_CARS_FILE  vehicle catalog (default <data dir>/cars.json)
#   FLEETCOST_LOG_LEVEL  root logging level (default INFO)

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


def _data_dir() -> Path:
    return Path(os.getenv("FLEETCOST_DATA_DIR", "data")).expanduser()


@dataclass
class Settings:
    data_dir: Path = field(default_factory=_data_dir)
    cars_file: Optional[Path] = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.cars_file is None:
            self.cars_file = self.data_dir / "cars.json"

    @classmethod
    def from_env(cls) -> "Settings":
        cars = (os.getenv("FLEETCOST_CARS_FILE") or "").strip()
        return cls(
            data_dir=_data_dir(),
            cars_file=Path(cars).expanduser() if cars else None,
            log_level=(os.getenv("FLEETCOST_LOG_LEVEL") or "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
