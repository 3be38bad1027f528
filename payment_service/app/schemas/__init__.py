"""
Pydantic schemas.

Schemas are grouped by domain and imported directly from their
modules, e.g. ``from payment_service.app.schemas.service_config import
ServiceConfiguration``.
"""
