"""
Core utilities shared across the site backend.

This package hosts configuration (paths, env vars) and logging setup. Services
and routers receive a Settings instance instead of reading os.environ.
"""
