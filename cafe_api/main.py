"""
main.py – FastAPI app entry point (slim wire-up only).
Chỉ kết nối routes, exception handlers và lifespan. Không chứa business logic.
"""
import logging
import os
from contextlib import asynccontextmanager
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI

from .core.cafe import CafeQueryError
from .deps import get_catalog
from .routes import cafe, system

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"✅ Ready. Cities: {', '.join(get_catalog().cities())}")
    yield
    logger.info("Shutdown.")


app = FastAPI(
    title="Cafe Catalog API",
    description="Danh sách quán cafe theo thành phố, có lọc theo tên và giới hạn số lượng.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_exception_handler(CafeQueryError, cafe.cafe_query_error_handler)

app.include_router(system.router)
app.include_router(cafe.router)


def run() -> None:
    """Console entry point: `cafe-api` (HOST/PORT từ env)."""
    import uvicorn
    uvicorn.run(
        app,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
        log_level=os.getenv("LOG_LEVEL", "INFO").lower(),
    )
