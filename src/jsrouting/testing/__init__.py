"""Test utilities for jsrouting endpoints.

    from jsrouting.testing import TestClient, decode_jsonp
"""

from jsrouting.testing.client import TestClient, decode_jsonp

__all__ = ["TestClient", "decode_jsonp"]
