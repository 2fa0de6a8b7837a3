"""
netroutes - static routes file parsing and formatting.
"""
from netroutes.core.exceptions import MalformedLineError, MissingFieldError, RouteFileError
from netroutes.models.route import ABSENT, Absent, RouteLike, RouteRecord
from netroutes.utils.parsers.routes_parser import RoutesFileParser, format_file, parse_file

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "Absent",
    "RouteLike",
    "RouteRecord",
    "RoutesFileParser",
    "parse_file",
    "format_file",
    "RouteFileError",
    "MalformedLineError",
    "MissingFieldError",
]
