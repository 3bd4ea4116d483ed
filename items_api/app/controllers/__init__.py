"""
Controllers translating HTTP payloads into service calls.

A controller instance is built once per application by ``create_app``
and handed to the routes through a FastAPI dependency.
"""
