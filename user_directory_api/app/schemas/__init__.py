"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies and double as the
records returned by repositories, so rows are converted exactly once.
"""
