"""Test utilities for raptor applications.

    from raptor.testing import TestClient
"""

from raptor.testing.client import TestClient

__all__ = ["TestClient"]
