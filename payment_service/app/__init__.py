"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: configuration and logging in ``core``, pydantic models in
``schemas`` and versioned routers under ``api/<version>/``.
"""

from .main import app  # noqa: F401
