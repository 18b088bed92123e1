# parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedExplanation


class ExplanationParser(ABC):
    @abstractmethod
    def parse(self, markup: str) -> ParsedExplanation:
        """
        Parse a rendered explanation page into segments and help texts.

        Requirements:
        - Deterministic output for same input
        - Segments keep document order
        - Never raises on unexpected markup; missing parts yield empty results
        """
        raise NotImplementedError
