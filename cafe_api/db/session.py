"""
cafe_api/db/session.py – Engine factory + read-only Session helper.

Catalog DB chỉ đọc 1 lần khi startup → engine tạo theo từng lần dùng
và dispose ngay khi session đóng, không giữ connection pool.
"""
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


def _create_engine(db_path: Path) -> Engine:
    return create_engine(
        f"sqlite:///{Path(db_path).resolve()}",
        connect_args={"check_same_thread": False},
        echo=False,
    )


@contextmanager
def db_session(db_path: Path) -> Generator[Session, None, None]:
    """Context manager trả về Session read-only, tự rollback/close/dispose."""
    engine = _create_engine(db_path)
    session: Session = sessionmaker(bind=engine, expire_on_commit=False)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        engine.dispose()
