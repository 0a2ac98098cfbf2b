"""
Persistence adapters.

Every site document is a flat JSON file under the data root. Services depend on
the repositories here rather than touching the files directly.
"""
