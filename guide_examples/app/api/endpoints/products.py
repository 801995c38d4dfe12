"""
Product endpoints.

These routes expose the read-only product catalogue.  Both handlers use
the per-request ``ProductRepository``; products are serialised through the
``ProductRead`` schema.

The id segment is captured as text and parsed with ``int()`` in the
handler.  A non-numeric id raises ``ValueError``, which the exception
handling middleware turns into a 500 response, just like any other
handler failure.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from guide_examples.app.api.deps import get_product_repository
from guide_examples.app.schemas.product import ProductRead
from guide_examples.app.services.product_service import ProductRepository

router = APIRouter()

PRODUCT_NOT_FOUND_MESSAGE = "Product not found"


@router.get("", response_model=List[ProductRead])
async def list_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> List[ProductRead]:
    """Return every product as a JSON array."""
    return repository.get_all_products()


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: str,
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductRead:
    """Return a single product.

    Returns HTTP 404 if the id is unknown.
    """
    product = repository.get_product_by_id(int(product_id))
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRODUCT_NOT_FOUND_MESSAGE)
    return product
