"""routes/cafe.py – GET /cafe (plain-text list quán theo thành phố)"""
from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import PlainTextResponse

from ..core.cafe import CafeQueryError
from ..deps import get_cafe_handler

router = APIRouter(tags=["Cafe"])


@router.get("/cafe", response_class=PlainTextResponse)
async def cafe(
    city:   Optional[list[str]] = Query(default=None, description="Tên thành phố (khớp chính xác)"),
    count:  Optional[list[str]] = Query(default=None, description="Số quán tối đa (số nguyên ≥ 0)"),
    search: Optional[list[str]] = Query(default=None, description="Lọc theo tên quán, không phân biệt hoa thường"),
):
    """
    Trả về danh sách quán của `city`, nối bằng dấu phẩy.
    Không có quán nào khớp → body rỗng (vẫn 200).
    Tham số lặp lại (`?city=a&city=b`) → lấy giá trị đầu tiên.
    """
    return PlainTextResponse(
        get_cafe_handler().render(_first(city), _first(count), _first(search))
    )


def _first(values: Optional[list[str]]) -> Optional[str]:
    return values[0] if values else None


async def cafe_query_error_handler(request: Request, exc: CafeQueryError) -> PlainTextResponse:
    """CafeQueryError → 400 với message nguyên văn."""
    return PlainTextResponse(str(exc), status_code=400)
