"""Test utilities for wildroute routers::

    from wildroute.testing import TestRequest
"""

from wildroute.testing.request import TestRequest

__all__ = ["TestRequest"]
