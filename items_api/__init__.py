"""
Top-level package for the Items API.

The HTTP service lives in the ``app`` subpackage; ``client`` provides
a small ``requests``-based wrapper for calling a running service.
"""

__all__ = []
