"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services
receive their repository through the constructor, so the in-memory
store used by default can be swapped without changing API handlers.
"""
