"""Search Ranking: filters candidates by average rating and orders them by name match.

Invariants:
    - Averages come from summarize_ratings (same numbers as place detail)
    - min_rating keeps places with average >= min_rating; unreviewed places (0) never pass
    - Exact case-insensitive name matches precede partial matches
    - Within a group, order is id ascending

Design Decisions:
    - Name matching in SQL narrows candidates; ranking happens here so it is testable without a DB
"""

from typing import Iterable

from place_reviews.core.rating_summary import summarize_ratings


def normalize_name_query(name: str | None) -> str | None:
    """Blank queries mean no name filter."""
    if name is None:
        return None
    stripped = name.strip()
    return stripped or None


def is_exact_name_match(place_name: str, query: str) -> bool:
    return place_name.lower() == query.lower()


def build_search_results(
    candidates: Iterable[tuple[int, str, list[int]]],
    name: str | None = None,
    min_rating: int | None = None,
) -> list[dict]:
    """Turn (id, name, ratings) candidates into ordered result rows. Pure, no IO."""
    query = normalize_name_query(name)
    rows = []
    for place_id, place_name, ratings in candidates:
        summary = summarize_ratings(ratings)
        if min_rating is not None and summary.average < min_rating:
            continue
        rows.append({
            "id": place_id,
            "name": place_name,
            "average_rating": summary.average,
        })

    if query is None:
        return sorted(rows, key=lambda r: r["id"])
    return sorted(
        rows,
        key=lambda r: (not is_exact_name_match(r["name"], query), r["id"]),
    )
