# src/explainshell_cli/formatting/formatter.py

import logging
from dataclasses import dataclass, field
from time import monotonic

from explainshell_cli.observability import names
from explainshell_cli.observability.base import MetricsHook, NoOpMetricsHook
from explainshell_cli.parsers.models import CommandSegment, ParsedExplanation

logger = logging.getLogger(__name__)

FRAGMENT_SEPARATOR = " [...] "
INDENT = "    "


@dataclass
class HelpGroup:
    """Segments sharing one help reference, merged for display."""

    help_id: str
    first_appearance_index: int
    command_texts: list[str] = field(default_factory=list)
    # dict keys as an insertion-ordered set
    expansion_links: dict[str, None] = field(default_factory=dict)


def build_help_groups(segments: list[CommandSegment]) -> list[HelpGroup]:
    """Group segments by help reference, ordered by first appearance.

    Segments without a help reference are left out.
    """
    groups: dict[str, HelpGroup] = {}

    for index, segment in enumerate(segments):
        if not segment.help_ref:
            continue

        group = groups.get(segment.help_ref)
        if group is None:
            group = HelpGroup(help_id=segment.help_ref, first_appearance_index=index)
            groups[segment.help_ref] = group

        text = segment.text.strip()
        if text:
            group.command_texts.append(text)

        expansion = segment.expansion
        if expansion and expansion.original_text and expansion.link:
            line = f"{INDENT}[ {expansion.original_text} -> {expansion.link} ]"
            group.expansion_links[line] = None

    return sorted(groups.values(), key=lambda g: g.first_appearance_index)


def _indent(text: str) -> str:
    return "\n".join(f"{INDENT}{line}" for line in text.split("\n"))


def format_explanation(
    parsed: ParsedExplanation,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    start = monotonic()
    groups = build_help_groups(parsed.segments)

    output = ""
    for group in groups:
        if group.command_texts:
            output += FRAGMENT_SEPARATOR.join(group.command_texts) + "\n\n"

        help_text = parsed.help_texts.get(group.help_id)
        if help_text:
            output += _indent(help_text) + "\n\n"

        if group.expansion_links:
            for line in group.expansion_links:
                output += line + "\n"
            output += "\n"

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.FORMAT_DURATION, elapsed_ms)
    metrics_hook.record_gauge(names.FORMAT_GROUPS, len(groups))
    logger.debug("Formatted %d help groups", len(groups))
    return output.strip()
