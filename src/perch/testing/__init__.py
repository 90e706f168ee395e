"""Test utilities for perch responders and sites.

    from perch.testing import TestClient, make_request
"""

from perch.testing.client import TestClient, make_request

__all__ = ["TestClient", "make_request"]
