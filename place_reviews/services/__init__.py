"""Services Layer: stores over AsyncSession plus the orchestrating operations.

Invariants:
    - Every store/service receives its AsyncSession explicitly (no global DB client)
    - Only review submission and registration commit; search and detail are read-only
"""
