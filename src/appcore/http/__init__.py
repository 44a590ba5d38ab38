"""HTTP primitives shared by the dispatcher and the ASGI adapter."""

from appcore.http.response import Response

__all__ = ["Response"]
