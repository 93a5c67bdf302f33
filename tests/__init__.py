"""
Test Suite for Library API

Test Organization:
- conftest.py: Shared fixtures (test database, client, services, sample data)
- test_author_service.py / test_book_service.py: Service-level tests
- test_authors.py / test_books.py: /api/v1 endpoint tests
- test_main.py: Root, health check and error handlers

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_book_service.py

    # Run with verbose output
    pytest -v
"""
