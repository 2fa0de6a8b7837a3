"""
Static routes file parser and formatter.

Each non-comment line describes one route:

    <network> <netmask> <gateway> <interface> [<options...>]
"""
import logging
import re
from typing import Iterable, List, Optional

from netroutes.core.config import settings
from netroutes.core.exceptions import MalformedLineError, MissingFieldError
from netroutes.models.route import ABSENT, RouteLike, RouteRecord, is_missing, is_present
from netroutes.utils.parsers.base_parser import ASCII_WHITESPACE, BaseFileParser

logger = logging.getLogger(__name__)

MIN_FIELDS = 4

_SEP = f"[{ASCII_WHITESPACE}]"
_TOKEN = f"[^{ASCII_WHITESPACE}]+"

# network netmask gateway interface [options...], options kept verbatim
ROUTE_LINE = re.compile(
    rf"{_SEP}*({_TOKEN}){_SEP}+({_TOKEN}){_SEP}+({_TOKEN}){_SEP}+({_TOKEN})"
    rf"(?:{_SEP}+([^{ASCII_WHITESPACE}].*))?{_SEP}*"
)
TOKEN = re.compile(_TOKEN)

# Checked in this order before a route is written
REQUIRED_FIELDS = ("netmask", "gateway", "interface", "network")


class RoutesFileParser(BaseFileParser):
    """Parser for static routes files."""

    def __init__(self, line_terminator: Optional[str] = None):
        """
        Args:
            line_terminator: Terminator for formatted lines; taken from settings when omitted
        """
        self.line_terminator = line_terminator or settings.LINE_TERMINATOR

    def parse_file(self, filename: str, contents: str) -> List[RouteRecord]:
        """
        Parse routes file contents.

        Args:
            filename: Filename hint used in error messages
            contents: Raw file text

        Returns:
            Route records in file order

        Raises:
            MalformedLineError: On the first line that cannot be parsed
        """
        routes = []

        for line_number, line in enumerate(self.split_lines(contents), start=1):
            if self.is_skippable(line):
                continue
            routes.append(self._parse_line(filename, line_number, line))

        logger.debug(f"Parsed {len(routes)} routes from {filename or '<text>'}")
        return routes

    def _parse_line(self, filename: str, line_number: int, line: str) -> RouteRecord:
        match = ROUTE_LINE.fullmatch(line)
        if not match:
            found = len(TOKEN.findall(line))
            logger.warning(f"Malformed route on line {line_number} of {filename or '<text>'}: {line!r}")
            raise MalformedLineError(
                line_number, line, f"expected at least {MIN_FIELDS} fields, got {found}", filename
            )

        network, netmask, gateway, interface, options = match.groups()
        if options is None:
            options = ABSENT

        try:
            return RouteRecord.build(network, netmask, gateway, interface, options)
        except ValueError as e:
            logger.warning(f"Bad netmask on line {line_number} of {filename or '<text>'}: {e}")
            raise MalformedLineError(line_number, line, str(e), filename) from e

    def format_file(self, filename: str, records: Iterable[RouteLike]) -> str:
        """
        Render routes as file contents.

        Args:
            filename: Filename hint used in error messages
            records: Route records or any route-like objects, in output order

        Returns:
            File text with one terminated line per route

        Raises:
            MissingFieldError: If any route lacks a mandatory field
        """
        lines = []

        for record in records:
            for field in REQUIRED_FIELDS:
                if is_missing(getattr(record, field, None)):
                    record_name = getattr(record, "name", None) or "<unnamed route>"
                    logger.warning(f"Cannot format {record_name}: missing {field}")
                    raise MissingFieldError(field, record_name, filename)
            lines.append(self._format_line(record))

        logger.debug(f"Formatted {len(lines)} routes for {filename or '<text>'}")
        return "".join(line + self.line_terminator for line in lines)

    @staticmethod
    def _format_line(record: RouteLike) -> str:
        line = f"{record.network} {record.netmask} {record.gateway} {record.interface}"
        options = getattr(record, "options", ABSENT)
        if is_present(options):
            line += f" {options}"
        return line


def parse_file(filename: str, contents: str) -> List[RouteRecord]:
    """Parse routes file contents with default settings."""
    return RoutesFileParser().parse_file(filename, contents)


def format_file(filename: str, records: Iterable[RouteLike]) -> str:
    """Format routes with default settings."""
    return RoutesFileParser().format_file(filename, records)
