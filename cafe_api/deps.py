"""
deps.py – Dependency Injection: singleton service instances.
Khởi tạo 1 lần duy nhất khi server start.
"""
import os
from .core.catalog import Catalog, load_catalog
from .core.cafe import CafeQueryHandler

# ── Core singletons ────────────────────────────────────────────────────────────

_catalog = load_catalog(os.getenv("CAFE_CATALOG_PATH") or None)
_cafe_handler = CafeQueryHandler(_catalog)


# ── Getters (dùng trong routes) ────────────────────────────────────────────────

def get_catalog()      -> Catalog:          return _catalog
def get_cafe_handler() -> CafeQueryHandler: return _cafe_handler
