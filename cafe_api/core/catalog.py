"""
core/catalog.py – Catalog class + loaders.
Trách nhiệm: giữ danh sách quán theo thành phố, chỉ đọc sau khi khởi tạo.

Nguồn dữ liệu:
  - embedded DEFAULT_CAFES (không cấu hình path)
  - file JSON  {"moscow": ["...", ...]}
  - file SQLite (.db / .sqlite) với bảng `cafe`, đọc qua SQLAlchemy ORM
"""
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from pydantic import ValidationError
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from ..db.models import Cafe
from ..db.session import db_session
from ..models import CatalogFile

logger = logging.getLogger(__name__)

DEFAULT_CAFES: dict[str, list[str]] = {
    "moscow": [
        "Мир кофе",
        "Сладкоежка",
        "Кофе и завтраки",
        "Сытый студент",
        "Ложка и вилка",
    ],
    "tula": [
        "Тульский пряник",
        "Самовар",
    ],
}

JSON_SUFFIXES   = {".json"}
SQLITE_SUFFIXES = {".db", ".sqlite", ".sqlite3"}


class CatalogError(RuntimeError):
    """Catalog source không đọc được hoặc sai định dạng."""


class Catalog(Mapping):
    """Immutable mapping city → tuple of venue names (giữ nguyên thứ tự)."""

    def __init__(self, data: Mapping[str, list[str] | tuple[str, ...]]) -> None:
        self._data = MappingProxyType({city: tuple(venues) for city, venues in data.items()})

    def __getitem__(self, city: str) -> tuple[str, ...]:
        return self._data[city]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"<Catalog cities={len(self)}>"

    def cities(self) -> list[str]:
        return sorted(self._data)

    def venues(self, city: str) -> tuple[str, ...]:
        """Danh sách quán của `city`. Raise KeyError nếu city không có."""
        return self._data[city]


# ── Loaders ────────────────────────────────────────────────────────────────────

def load_catalog(path: Optional[str | Path] = None) -> Catalog:
    """Build Catalog từ path (JSON/SQLite) hoặc dữ liệu embedded."""
    if not path:
        logger.info(f"Using embedded catalog ({len(DEFAULT_CAFES)} cities)")
        return Catalog(DEFAULT_CAFES)

    path = Path(path)
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        catalog = _load_json(path)
    elif suffix in SQLITE_SUFFIXES:
        catalog = _load_sqlite(path)
    else:
        raise CatalogError(f"Unsupported catalog format: {path.name}")

    logger.info(f"Loaded catalog from {path} ({len(catalog)} cities)")
    return catalog


def _load_json(path: Path) -> Catalog:
    try:
        parsed = CatalogFile.model_validate_json(path.read_bytes())
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog file {path}: {e}") from e
    return Catalog(parsed.root)


def _load_sqlite(path: Path) -> Catalog:
    data: dict[str, list[str]] = {}
    try:
        with db_session(path) as session:
            rows = (
                session.query(Cafe)
                .order_by(Cafe.city, func.coalesce(Cafe.position, 0), Cafe.id)
                .all()
            )
            for row in rows:
                data.setdefault(row.city, []).append(row.name)
    except SQLAlchemyError as e:
        raise CatalogError(f"Cannot read catalog db {path}: {e}") from e

    try:
        CatalogFile.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog db {path}: {e}") from e
    return Catalog(data)

