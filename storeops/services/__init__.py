"""
High-level use cases for the storeops API.

Routers call these services instead of manipulating the JSON files directly.
"""
