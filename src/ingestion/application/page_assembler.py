from enum import Enum
from typing import Callable

from src.config.logger_config import logger
from src.ingestion.application.ports import PageGatePort
from src.ingestion.domain.models import DumpEvent, DumpEventKind, Page
from src.ingestion.domain.wikitext import clean_wikitext

PAGE_ELEMENT = "page"


class AssemblerState(str, Enum):
    IDLE = "idle"
    IN_PAGE = "in_page"


class PageAssembler:
    """Finite-state machine turning dump events into accepted Page records.

    feed() returns a Page only when a page element closes and the page passed
    both gate stages; everything else returns None. A page rejected by the
    title stage is still walked to its end so the event stream stays aligned,
    but its text is never normalized.
    """

    def __init__(
        self,
        gate: PageGatePort,
        normalizer: Callable[[str], str] = clean_wikitext,
    ) -> None:
        self.gate = gate
        self.normalizer = normalizer
        self.state = AssemblerState.IDLE
        self.suppressed = False
        self.current_element: str | None = None
        self._page: Page | None = None
        self._buffer: list[str] = []
        self._redirect_attr: str | None = None

    def feed(self, event: DumpEvent) -> Page | None:
        if event.kind is DumpEventKind.START:
            self._on_start(event)
            return None
        if event.kind is DumpEventKind.TEXT:
            self._buffer.append(event.text)
            return None
        return self._on_end(event)

    def reset(self) -> None:
        self.state = AssemblerState.IDLE
        self.suppressed = False
        self.current_element = None
        self._page = None
        self._buffer.clear()
        self._redirect_attr = None

    def _on_start(self, event: DumpEvent) -> None:
        self._buffer.clear()
        self.current_element = event.name
        if event.name == PAGE_ELEMENT:
            self.state = AssemblerState.IN_PAGE
            self.suppressed = False
            self._page = Page()
            self._redirect_attr = None
        elif event.name == "redirect" and self.state is AssemblerState.IN_PAGE:
            self._redirect_attr = event.attrs.get("title")

    def _on_end(self, event: DumpEvent) -> Page | None:
        text = "".join(self._buffer)
        self._buffer.clear()
        self.current_element = None
        if self.state is not AssemblerState.IN_PAGE or self._page is None:
            return None

        page = self._page
        name = event.name
        if name == "title":
            page.title = text
            if not self.gate.accepts_title(page.title):
                self.suppressed = True
        elif name == "id":
            # Zero means unset: the first id that parses wins, so revision and
            # contributor ids only fill in for a missing or unparseable page id.
            if page.id == 0:
                page.id = _parse_id(text)
        elif name == "text":
            if not self.suppressed:
                page.content = self.normalizer(text)
        elif name == "redirect":
            page.redirect = self._redirect_attr if self._redirect_attr is not None else text
        elif name == PAGE_ELEMENT:
            return self._finish_page(page)
        return None

    def _finish_page(self, page: Page) -> Page | None:
        accepted = not self.suppressed and self.gate.accepts_content(page.title, page.content)
        self.reset()
        if not accepted:
            return None
        return page


def _parse_id(raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        logger.debug("Unparseable page id defaulted to 0: raw={!r}", raw)
        return 0
    return value if value > 0 else 0
