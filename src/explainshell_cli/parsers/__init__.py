from .base import ExplanationParser
from .html_parser import ExplainshellHtmlParser
from .models import CommandSegment, Expansion, ParsedExplanation
from .text import clean_text, resolve_href

__all__ = [
    "CommandSegment",
    "Expansion",
    "ExplainshellHtmlParser",
    "ExplanationParser",
    "ParsedExplanation",
    "clean_text",
    "resolve_href",
]
