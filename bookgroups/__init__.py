"""
Read-only lookup service over a fixed catalogue of book groups.

The ``catalog`` subpackage holds the schemas, the data store, the
fuzzy title matcher and the route definitions. ``main`` wires them
together into a FastAPI application.
"""

__version__ = "1.0.0"
