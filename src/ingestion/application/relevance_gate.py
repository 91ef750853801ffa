from src.ingestion.application.ports import PageGatePort, TopicFilterPort
from src.ingestion.domain.rules import is_namespaced_title


class RelevanceGate(PageGatePort):
    """Two-stage inclusion policy around an optional topic filter.

    accepts_title() is cheap and runs before the page text is captured, so
    most excluded pages are never normalized. accepts_content() only runs on
    pages that passed the title stage.
    """

    def __init__(self, topic_filter: TopicFilterPort | None = None) -> None:
        self.topic_filter = topic_filter

    def accepts_title(self, title: str) -> bool:
        if not title:
            return False
        if is_namespaced_title(title):
            return False
        if self.topic_filter is None:
            return True
        return self.topic_filter.matches_title(title)

    def accepts_content(self, title: str, content: str) -> bool:
        if self.topic_filter is None:
            return True
        return self.topic_filter.is_relevant(title, content)
