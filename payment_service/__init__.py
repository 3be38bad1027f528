"""
Top‑level package for the Payment Service.

This file makes ``payment_service`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``payment_service.app.main``.  The package version is exposed here so
that the configuration layer and the diagnostic endpoints report the
same value.

All functionality lives in submodules under ``app``.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
