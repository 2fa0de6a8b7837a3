"""
Base class for line-oriented file formats.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable, List

# Field separators; Unicode spaces are ordinary field content
ASCII_WHITESPACE = " \t\f\v"


class BaseFileParser(ABC):
    """Two-way converter between file text and records."""

    @abstractmethod
    def parse_file(self, filename: str, contents: str) -> List[Any]:
        """Parse file contents into records."""
        pass

    @abstractmethod
    def format_file(self, filename: str, records: Iterable[Any]) -> str:
        """Render records back into file contents."""
        pass

    @staticmethod
    def split_lines(contents: str) -> List[str]:
        """Split on LF only, dropping the CR of CRLF endings."""
        return [line[:-1] if line.endswith("\r") else line for line in contents.split("\n")]

    @staticmethod
    def is_skippable(line: str) -> bool:
        """Blank lines and '#' comments carry no records."""
        stripped = line.strip(ASCII_WHITESPACE)
        return not stripped or stripped.startswith("#")
