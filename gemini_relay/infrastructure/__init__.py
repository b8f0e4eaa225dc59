"""Infrastructure Layer — upstream HTTP client and logging setup.

Invariants:
    - Infrastructure only imports pure helpers from core/ (payload builders, types)
    - Upstream transport failures propagate as exceptions; no retry
"""
