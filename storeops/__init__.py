"""Storeops: JSON-file backed REST API for the operations dashboard.

The ASGI app lives in ``storeops.app`` (``app`` instance or ``create_app`` factory).
"""
