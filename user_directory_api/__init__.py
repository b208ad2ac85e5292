"""
Top‑level package for the User Directory API.

All functionality lives in submodules under ``app``; import the
ASGI application as ``user_directory_api.app.main:app``.
"""

__all__ = []
