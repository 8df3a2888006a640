"""
cafe_api/db/models.py – SQLAlchemy ORM model cho bảng `cafe`.

Không tạo bảng (catalog DB được build sẵn bên ngoài service).
Chỉ map Python class ↔ SQLite table, chỉ dùng để đọc.
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class Cafe(Base):
    __tablename__ = "cafe"

    id       = Column(Integer, primary_key=True, autoincrement=True)
    city     = Column(String,  nullable=False)
    name     = Column(String,  nullable=False)
    position = Column(Integer, nullable=True, default=0)

    def __repr__(self) -> str:
        return f"<Cafe id={self.id} city={self.city!r} name={self.name!r}>"
