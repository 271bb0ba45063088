"""Services Layer — store-facing orchestration around the pure core.

Invariants:
    - Validation (core/) runs before any store call
    - Services raise core error types; routes never build error bodies themselves
"""
