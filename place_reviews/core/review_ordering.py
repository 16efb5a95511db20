"""Review Ordering: the viewer's own review first, then newest first.

Invariants:
    - At most one review per (user, place), so at most one entry is pinned
    - Remaining reviews sort by created_at descending, ties by id descending
"""


def order_reviews_for_viewer(reviews: list[dict], viewer_id: int | None) -> list[dict]:
    """Order review dicts (keys: id, user_id, created_at) for display. Pure, no IO."""
    own = [r for r in reviews if viewer_id is not None and r["user_id"] == viewer_id]
    others = [r for r in reviews if viewer_id is None or r["user_id"] != viewer_id]
    others.sort(key=lambda r: (r["created_at"], r["id"]), reverse=True)
    return own + others
