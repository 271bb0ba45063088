"""Client Layer — drives the /api/product endpoints on behalf of a UI.

Invariants:
    - Client code never imports from api/, services/ or infrastructure/
    - Shares pure helpers with the server through core/ only
"""
