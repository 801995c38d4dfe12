"""
Top-level router.

This router aggregates the endpoint routers under their prefixes.  When
new endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import greet, home, products

router = APIRouter()

router.include_router(home.router, tags=["home"])
router.include_router(greet.router, prefix="/greet", tags=["greet"])
router.include_router(products.router, prefix="/products", tags=["products"])
