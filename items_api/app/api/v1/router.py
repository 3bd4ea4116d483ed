"""
Top-level router for version 1 of the API.

This router aggregates domain-specific routers under a unified
prefix.  When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import items

router = APIRouter()

router.include_router(items.router, prefix="/items", tags=["items"])
