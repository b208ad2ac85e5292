"""
API package containing versioned routes and shared request
dependencies (``deps``).  A version subpackage such as ``v1`` exposes
a top‑level ``router`` which includes its resource endpoints.
"""
