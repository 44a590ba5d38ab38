"""Test utilities for AppCore applications::

    from appcore.testing import TestClient
"""

from appcore.testing.client import TestClient

__all__ = ["TestClient"]
