"""ASGI transport for AppCore."""
