"""
Catalog package for the book group API.

This package contains the schemas, the data store, the title matcher
and the route definitions that expose the read-only group, location and
search endpoints.
"""

from .router import router as catalog_router  # noqa: F401
