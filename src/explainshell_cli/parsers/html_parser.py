# parsers/html_parser.py

import logging
from time import monotonic

from explainshell_cli.config import DEFAULT_BASE_URL
from explainshell_cli.observability import names
from explainshell_cli.observability.base import MetricsHook, NoOpMetricsHook

from .base import ExplanationParser
from .dom import Node, parse_html
from .models import CommandSegment, Expansion, ParsedExplanation
from .text import clean_text, resolve_href

logger = logging.getLogger(__name__)

HELP_REF_ATTR = "helpref"
HELP_BOX_CLASS = "help-box"
COMMAND_REGION_ID = "command"
EXPANSION_CLASS = "expansion-substitution"


class ExplainshellHtmlParser(ExplanationParser):
    """
    Extracts annotated command segments from an explainshell page.
    - Help texts come from <pre class="help-box" id="...">
    - Segments are every [helpref] element inside div#command, nested ones included
    - Expansions come from span.expansion-substitution links, or a direct <a> child
    """

    def __init__(
        self,
        origin: str = DEFAULT_BASE_URL,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._origin = origin
        self.metrics_hook = metrics_hook

    def parse(self, markup: str) -> ParsedExplanation:
        start = monotonic()
        document = parse_html(markup)

        help_texts = self._extract_help_texts(document)
        segments: list[CommandSegment] = []
        for element in self._select_help_ref_elements(document):
            segment = self._build_segment(element)
            if segment is None:
                logger.debug(
                    "Dropping empty segment for helpref=%s", element.get(HELP_REF_ATTR)
                )
                continue
            segments.append(segment)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PARSE_SEGMENTS_TOTAL, len(segments))
        self.metrics_hook.record_gauge(names.PARSE_HELP_TEXTS, len(help_texts))
        logger.debug(
            "Parsed %d segments and %d help texts", len(segments), len(help_texts)
        )
        return ParsedExplanation(segments=segments, help_texts=help_texts)

    def _extract_help_texts(self, document: Node) -> dict[str, str]:
        help_texts: dict[str, str] = {}
        for block in document.find_all(_is_help_box):
            block_id = block.get("id")
            if block_id:
                # Later blocks with the same id replace earlier ones
                help_texts[block_id] = block.text_content().strip()
        return help_texts

    def _select_help_ref_elements(self, document: Node) -> list[Node]:
        selected: list[Node] = []
        seen: set[int] = set()
        for region in document.find_all(_is_command_region):
            for element in region.find_all(lambda n: n.get(HELP_REF_ATTR) is not None):
                if id(element) not in seen:
                    seen.add(id(element))
                    selected.append(element)
        return selected

    def _build_segment(self, element: Node) -> CommandSegment | None:
        pieces: list[str] = []
        expansion: Expansion | None = None

        for child in element.children:
            if child.is_text:
                pieces.append(child.text)
            elif child.tag == "span" and child.has_class(EXPANSION_CLASS):
                link = child.find(lambda n: n.tag == "a")
                if link is None:
                    continue
                original_text = clean_text(link.text_content())
                href = link.get("href")
                if href:
                    expansion = Expansion(
                        original_text=original_text,
                        link=resolve_href(href, self._origin),
                    )
                pieces.append(original_text)
            else:
                pieces.append(child.text_content())

        if expansion is None:
            expansion = self._direct_link_expansion(element)

        text = clean_text("".join(pieces))
        if not text and not (expansion and expansion.original_text):
            return None

        return CommandSegment(
            text=text,
            help_ref=element.get(HELP_REF_ATTR),
            expansion=expansion,
        )

    def _direct_link_expansion(self, element: Node) -> Expansion | None:
        """
        Fallback for a helpref element that wraps a bare link.
        """
        for child in element.element_children():
            if child.tag == "a":
                href = child.get("href")
                if not href:
                    return None
                return Expansion(
                    original_text=clean_text(child.text_content()),
                    link=resolve_href(href, self._origin),
                )
        return None


def _is_help_box(node: Node) -> bool:
    return node.tag == "pre" and node.has_class(HELP_BOX_CLASS)


def _is_command_region(node: Node) -> bool:
    return node.tag == "div" and node.get("id") == COMMAND_REGION_ID
