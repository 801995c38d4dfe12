"""
Service layer for products.

The data lives in a :class:`ProductCatalogue`, an immutable store owned by
the application and registered as a singleton.  Handlers talk to a
:class:`ProductRepository`, created once per request on top of the
catalogue, which is where lookups and logging happen.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from guide_examples.app.schemas.product import ProductRead


logger = logging.getLogger(__name__)


class ProductCatalogue:
    """Read-only collection of products indexed by id."""

    def __init__(self, products: Iterable[ProductRead]) -> None:
        items: Tuple[ProductRead, ...] = tuple(products)
        index: Dict[int, ProductRead] = {}
        for product in items:
            if product.id in index:
                raise ValueError(f"Duplicate product id {product.id}")
            index[product.id] = product
        self._items = items
        self._index = index

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def get(self, product_id: int) -> Optional[ProductRead]:
        return self._index.get(product_id)


class ProductRepository:
    """Per-request access to the product catalogue."""

    def __init__(self, catalogue: ProductCatalogue) -> None:
        self._catalogue = catalogue

    def get_all_products(self) -> List[ProductRead]:
        """Return every product in catalogue order."""
        return list(self._catalogue)

    def get_product_by_id(self, product_id: int) -> Optional[ProductRead]:
        """Return the product with ``product_id`` or ``None`` if unknown."""
        product = self._catalogue.get(product_id)
        if product is None:
            logger.info("Product %s not found", product_id)
        return product
