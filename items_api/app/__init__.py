"""
Application package initializer.

This package contains the main entrypoint for the API and its
layers: ``api`` (routers), ``controllers``, ``services``,
``repositories`` (data access), ``models`` (domain entities) and
``schemas`` (request/response payloads).  Versioning is handled by
grouping routers under the ``api/<version>/`` hierarchy.
"""

from .main import app, create_app  # noqa: F401
