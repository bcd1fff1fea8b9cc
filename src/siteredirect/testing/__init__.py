"""Test utilities for siteredirect.

    from siteredirect.testing import TestClient
"""

from siteredirect.testing.client import TestClient

__all__ = ["TestClient"]
