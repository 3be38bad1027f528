"""
Top‑level router for version 1 of the API.

This router aggregates the endpoint routers under a unified prefix.
The configuration diagnostics live under the payments API path, so
they answer on ``/api/v1/payments/config/...`` once the router is
mounted with the ``/api/v1`` prefix.
"""

from fastapi import APIRouter

from .endpoints import config

router = APIRouter()

router.include_router(config.router, prefix="/payments/config", tags=["System"])
