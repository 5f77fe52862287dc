"""
Name service failures.

Both are translated to HTTP responses in `api/main.py`.
"""

from __future__ import annotations


class NameServiceError(RuntimeError):
    pass


class ValidationError(NameServiceError):
    """Bad client input (HTTP 400)."""


class PersistenceError(NameServiceError):
    """The store rejected the operation or could not be reached (HTTP 500)."""
