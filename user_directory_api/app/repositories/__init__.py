"""
Data access layer.

Repositories translate entity operations into SQL against the tables
created by ``core.db``.  Services receive a repository instance when
they are constructed and never open connections themselves.
"""
