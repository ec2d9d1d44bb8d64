# src/ags_kit/parsers/base.py

from abc import ABC, abstractmethod
from collections.abc import Iterable

from .models import ParsedDocument


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, lines: Iterable[str]) -> ParsedDocument:
        """
        Parse an ordered sequence of lines into a structured document.

        Requirements:
        - Deterministic output for same input
        - Line numbers are 0-based positions in `lines`
        - Never raises on malformed content
        """
        raise NotImplementedError
