"""
Core utilities shared across the storeops API.

This package hosts configuration (environment variables, data directory) and
the logging setup. Services and routers depend on these primitives instead of
reading the environment themselves.
"""
