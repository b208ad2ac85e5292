"""
Service layer abstraction.

Each service encapsulates the operations of a domain and receives its
repository through the constructor, so API handlers never touch SQL
and tests can hand in a repository pointed at a scratch database.
"""
