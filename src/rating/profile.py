# src/rating/profile.py
"""
Driver/vehicle profile consumed by the rating engine.

The engine assumes the fields are present and well-typed; validation belongs to
the caller (the API layer validates with pydantic).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

# Accepted input names -> dataclass field
_FIELD_ALIASES: Dict[str, str] = {
    "age": "age",
    "vehicle_make": "vehicle_make",
    "vehicleMake": "vehicle_make",
    "vehicle_model": "vehicle_model",
    "vehicleModel": "vehicle_model",
    "accidents_in_last_five_years": "accidents_in_last_five_years",
    "accidentsInLastFiveYears": "accidents_in_last_five_years",
}


@dataclass(frozen=True)
class DriverProfile:
    age: int
    vehicle_make: str
    vehicle_model: str
    accidents_in_last_five_years: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DriverProfile":
        """
        Build a profile from a raw mapping (JSON body, dataframe row, ...).

        Both snake_case and camelCase keys are accepted. Unknown keys are ignored.
        """
        values: Dict[str, Any] = {}
        for key, val in data.items():
            name = _FIELD_ALIASES.get(key)
            if name is not None:
                values[name] = val

        missing = [f for f in ("age", "vehicle_make", "vehicle_model") if f not in values]
        if missing:
            raise KeyError(f"Profile missing fields: {missing}")

        return cls(
            age=int(values["age"]),
            vehicle_make=str(values["vehicle_make"]),
            vehicle_model=str(values["vehicle_model"]),
            accidents_in_last_five_years=int(values.get("accidents_in_last_five_years", 0)),
        )
