"""
Core utilities shared across the ERP backend.

This package hosts configuration helpers (env vars, storage paths, paging
limits) and the logging setup used by the app factory and the scripts.
"""
