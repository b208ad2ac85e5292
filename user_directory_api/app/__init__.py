"""
Application package initializer.

This package contains the main entrypoint for the API and its
layers: ``api`` (HTTP routes, versioned under ``api/<version>/``),
``services`` (operations exposed to the routes), ``repositories`` (SQL
against the database) and ``schemas`` (request and response bodies).
``core`` holds configuration, logging and database setup.
"""

from .main import app, create_app  # noqa: F401
