"""API Layer: FastAPI routes, auth dependency and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes delegate to services; no business logic here
"""
