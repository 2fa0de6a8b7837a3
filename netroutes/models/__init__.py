"""Route models."""
from netroutes.models.route import ABSENT, Absent, RouteLike, RouteRecord

__all__ = [
    "ABSENT",
    "Absent",
    "RouteLike",
    "RouteRecord",
]
