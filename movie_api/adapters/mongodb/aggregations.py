"""
MongoDB aggregation pipelines for movie statistics.
"""

from typing import Any, Dict, List


def overview_pipeline() -> List[Dict[str, Any]]:
    """Totals and averages over the whole collection, as a single row."""
    return [
        {
            "$group": {
                "_id": None,
                "totalMovies": {"$sum": 1},
                "avgRating": {"$avg": "$rating"},
                "avgDuration": {"$avg": "$duration"},
                "totalBudget": {"$sum": "$budget"},
                "totalBoxOffice": {"$sum": "$boxOffice"},
            }
        }
    ]


def genre_pipeline() -> List[Dict[str, Any]]:
    """Movie count and average rating per genre, most common genre first."""
    return [
        {"$unwind": "$genre"},
        {
            "$group": {
                "_id": "$genre",
                "count": {"$sum": 1},
                "avgRating": {"$avg": "$rating"},
            }
        },
        {"$sort": {"count": -1}},
    ]


def year_pipeline(limit: int = 10) -> List[Dict[str, Any]]:
    """Movie count and average rating per release year, newest years first."""
    return [
        {
            "$group": {
                "_id": {"$year": "$releaseDate"},
                "count": {"$sum": 1},
                "avgRating": {"$avg": "$rating"},
            }
        },
        {"$sort": {"_id": -1}},
        {"$limit": limit},
    ]
