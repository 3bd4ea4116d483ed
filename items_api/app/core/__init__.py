"""
Cross-cutting application infrastructure: settings, logging setup and
exception handling.
"""
