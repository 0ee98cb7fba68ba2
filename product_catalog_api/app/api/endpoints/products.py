"""
Product endpoints.

These routes expose the CRUD API for the catalog.  Handlers are thin:
the service layer validates input and raises catalog errors, which
the application's exception handlers map onto status codes (400 for
validation problems and duplicate SKUs, 404 for unknown ids, 500 for
store failures).
"""

from typing import Annotated, List

from fastapi import APIRouter, Path, Response, status

from product_catalog_api.app.schemas.product import ProductRead, ProductWrite
from product_catalog_api.app.services.product_service import ProductService

router = APIRouter()

# Ids outside SQLite's INTEGER range cannot exist; they fail path
# validation and are answered as not found.
ProductId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(product_in: ProductWrite) -> ProductRead:
    """Register a new product.

    Returns HTTP 400 with every validation message when the payload is
    unacceptable, or with ``SKU already exists`` when the SKU is taken.
    """
    return await ProductService.create_product(product_in)


@router.get("", response_model=List[ProductRead])
async def list_products() -> List[ProductRead]:
    """Return all products sorted by name."""
    return await ProductService.list_products()


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: ProductId) -> ProductRead:
    """Retrieve a single product by ID."""
    return await ProductService.get_product(product_id)


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(product_id: ProductId, product_in: ProductWrite) -> ProductRead:
    """Replace every field of an existing product except its id."""
    return await ProductService.update_product(product_id, product_in)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: ProductId) -> Response:
    """Delete a product."""
    await ProductService.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
