"""FastAPI REST API for the furniture configurator.

This module provides a REST API resolving shareable-link queries, laying out
template columns and validating constraint tables.

Usage:
    uvicorn furniture.web:app --reload
"""

from furniture.web.app import app, create_app

__all__ = ["app", "create_app"]
