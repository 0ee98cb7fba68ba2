"""
Top‑level package for the Product Catalog API.

All functionality lives in submodules under ``app``; import
``product_catalog_api.app.main`` to obtain the ASGI application.
"""

__all__ = []
