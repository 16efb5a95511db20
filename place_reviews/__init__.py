"""Place Reviews Application Package: users, places, reviews and rating search.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
