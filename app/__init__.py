"""
Library API Application Package

This is the main application package for the Library API, which manages
authors and the books they wrote.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas (including the response envelope)
- routers/: API route handlers
- services/: Business logic (AuthorService, BookService)
- utils/: Helper functions
"""

__version__ = "0.1.0"
