"""Infrastructure Layer — store connector and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store failures mapped to core error types before leaving this layer
"""
