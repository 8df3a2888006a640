"""
core/cafe.py – CafeQueryHandler class.
Trách nhiệm: validate city/count/search, lọc + cắt danh sách quán, serialize.

Thuần tuý (pure): không I/O, không state giữa các request.
Catalog được inject qua constructor để test với catalog thay thế.
"""
import logging
import re
from typing import Optional

from .catalog import Catalog

logger = logging.getLogger(__name__)

UNKNOWN_CITY    = "unknown city"
INCORRECT_COUNT = "incorrect count"
SEPARATOR       = ","

_COUNT_RE = re.compile(r"[+-]?[0-9]+")


class CafeQueryError(ValueError):
    """Lỗi input từ client → 400."""


class UnknownCityError(CafeQueryError):
    def __init__(self) -> None:
        super().__init__(UNKNOWN_CITY)


class IncorrectCountError(CafeQueryError):
    def __init__(self) -> None:
        super().__init__(INCORRECT_COUNT)


class CafeQueryHandler:
    """Xử lý GET /cafe."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    # ── Public API ─────────────────────────────────────────────────────────────

    def handle(
        self,
        city: Optional[str],
        count: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[str]:
        """
        Trả về danh sách quán sau khi lọc theo `search` và cắt theo `count`.
        Raise UnknownCityError / IncorrectCountError khi input sai.
        """
        if not city or city not in self._catalog:
            logger.debug(f"Rejected city={city!r}")
            raise UnknownCityError()

        limit = self.parse_count(count) if count else None

        venues = self._catalog.venues(city)
        if search:
            venues = self._filter(venues, search)
        if limit is not None:
            venues = venues[:limit]
        return list(venues)

    def render(
        self,
        city: Optional[str],
        count: Optional[str] = None,
        search: Optional[str] = None,
    ) -> str:
        """handle() + serialize() – body cho response 200."""
        return self.serialize(self.handle(city, count, search))

    # ── Helpers ────────────────────────────────────────────────────────────────

    @staticmethod
    def parse_count(raw: str) -> int:
        """Parse `count`: số nguyên không âm (ASCII digits), ngược lại raise."""
        if not _COUNT_RE.fullmatch(raw):
            logger.debug(f"Rejected count={raw!r}")
            raise IncorrectCountError()
        try:
            value = int(raw)
        except ValueError:
            # int() từ chối chuỗi quá dài (giới hạn số chữ số)
            logger.debug(f"Rejected count of {len(raw)} chars")
            raise IncorrectCountError() from None
        if value < 0:
            logger.debug(f"Rejected negative count={value}")
            raise IncorrectCountError()
        return value

    @staticmethod
    def serialize(venues: list[str]) -> str:
        return SEPARATOR.join(venues)

    @staticmethod
    def _filter(venues: tuple[str, ...], search: str) -> tuple[str, ...]:
        needle = search.casefold()
        return tuple(v for v in venues if needle in v.casefold())
