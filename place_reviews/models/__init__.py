"""ORM Models: SQLAlchemy declarative models for users, places and reviews.

Invariants:
    - All models inherit from Base (db/base.py)
    - Uniqueness lives in table constraints: users.phone, places(name, address),
      reviews(user_id, place_id)

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from place_reviews.models.user import User  # noqa: F401
from place_reviews.models.place import Place  # noqa: F401
from place_reviews.models.review import Review  # noqa: F401
