"""Infrastructure Layer: database access, security primitives and logging.

Invariants:
    - Infrastructure never imports domain logic beyond core/errors.py
"""
