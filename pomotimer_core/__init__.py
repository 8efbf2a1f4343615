"""
Pomotimer Core - Shared library for the Pomotimer backend

This package provides common functionality used by the Pomotimer service:
- Database models and session management
- Authentication utilities (password hashing, JWT, FastAPI dependencies)
- Configuration management
- Typed service errors and response helpers
"""

__version__ = "1.0.0"
