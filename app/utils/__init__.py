"""
Utilities Package

This package contains helper functions used across the application.

- responses.py: Map response envelopes to HTTP status codes
"""
