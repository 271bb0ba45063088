"""Core Layer — pure domain logic, no IO, no async, no store access.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, db/ or client/
    - All functions are pure and deterministic; both server and client import them
"""
