"""
models.py – Pydantic schemas cho catalog file + system responses.
"""
from pydantic import BaseModel, Field, RootModel, field_validator
from typing import List


# ── Catalog file ───────────────────────────────────────────────────────────────

class CatalogFile(RootModel[dict[str, List[str]]]):
    """JSON catalog: {"<city>": ["quán 1", "quán 2", ...], ...}"""

    @field_validator("root")
    @classmethod
    def _check_names(cls, value: dict[str, List[str]]) -> dict[str, List[str]]:
        for city, venues in value.items():
            if not city:
                raise ValueError("city name must not be empty")
            for name in venues:
                if not name:
                    raise ValueError(f"empty venue name in city {city!r}")
                if "," in name:
                    raise ValueError(f"venue name {name!r} must not contain ','")
        return value


# ── Response Models ────────────────────────────────────────────────────────────

class CitiesResponse(BaseModel):
    cities: List[str] = Field(description="Danh sách thành phố có trong catalog")


class HealthResponse(BaseModel):
    status: str
    time: str
    cities: List[str]
