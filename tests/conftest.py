"""tests/conftest.py – shared fixtures for all tests."""
import os
import sqlite3
from pathlib import Path

import pytest

# Tests luôn chạy với catalog embedded. Giá trị rỗng (không xoá) để
# load_dotenv() không ghi đè từ file .env cục bộ.
os.environ["CAFE_CATALOG_PATH"] = ""

from cafe_api.core.cafe import CafeQueryHandler
from cafe_api.core.catalog import Catalog


SAMPLE_CAFES = {
    "moscow": ["Мир кофе", "Сладкоежка", "Кофе и завтраки", "Сытый студент", "Ложка и вилка"],
    "tula":   ["Тульский пряник", "Самовар"],
    "empty":  [],
}


def create_catalog_db(path: Path, rows: list[tuple]) -> None:
    """Tạo SQLite catalog với bảng `cafe` (id, city, name, position)."""
    conn = sqlite3.connect(str(path))
    conn.execute("""
        CREATE TABLE cafe (
          id INTEGER PRIMARY KEY,
          city TEXT NOT NULL,
          name TEXT NOT NULL,
          position INTEGER DEFAULT 0
        )
    """)
    conn.executemany("INSERT INTO cafe VALUES (?,?,?,?)", rows)
    conn.commit()
    conn.close()


@pytest.fixture
def catalog_db():
    return create_catalog_db


@pytest.fixture
def sample_catalog() -> Catalog:
    return Catalog(SAMPLE_CAFES)


@pytest.fixture
def handler(sample_catalog) -> CafeQueryHandler:
    return CafeQueryHandler(sample_catalog)
