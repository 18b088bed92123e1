# parsers/text.py

import re

from explainshell_cli.config import DEFAULT_BASE_URL

WHITESPACE_RE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Normalize a fragment of extracted text for display.

    Drops "(1)" footnote markers, turns literal ``&nbsp;`` into spaces,
    collapses whitespace runs and trims.
    """
    text = text.replace("(1)", "").replace("&nbsp;", " ")
    return WHITESPACE_RE.sub(" ", text).strip()


def resolve_href(href: str, origin: str = DEFAULT_BASE_URL) -> str:
    """Make a root-relative href absolute against the service origin."""
    if href.startswith("/"):
        return f"{origin.rstrip('/')}{href}"
    return href
