"""Inventory Manager — product CRUD service and client.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
