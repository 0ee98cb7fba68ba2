"""
Top‑level API router.

Aggregates the resource routers under their fixed paths.  The product
routes are served at ``/products`` without a version prefix because
the UI and existing clients address them there.
"""

from fastapi import APIRouter

from .endpoints import products

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])


@router.get("/health", tags=["health"])
async def health() -> dict:
    """Liveness probe."""
    return {"status": "ok"}
