# parsers/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Expansion:
    original_text: str
    link: str


@dataclass(frozen=True)
class CommandSegment:
    text: str
    help_ref: str | None = None
    expansion: Expansion | None = None


@dataclass(frozen=True)
class ParsedExplanation:
    segments: list[CommandSegment] = field(default_factory=list)
    help_texts: dict[str, str] = field(default_factory=dict)
