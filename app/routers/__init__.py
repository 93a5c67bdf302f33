"""
API Routers Package

This package contains FastAPI routers that handle API endpoints.

Router Structure:
- authors.py: /api/v1/authors/* endpoints
- books.py: /api/v1/books/* endpoints

Each router is imported and registered in main.py.
"""

from app.routers.authors import router as authors_router
from app.routers.books import router as books_router

__all__ = [
    "authors_router",
    "books_router",
]
