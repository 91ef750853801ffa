from typing import Iterator, Protocol, runtime_checkable

from src.ingestion.domain.models import DumpEvent


@runtime_checkable
class TopicFilterPort(Protocol):
    name: str
    description: str
    keywords: tuple[str, ...]

    def server_name(self, language: str) -> str: ...

    def matches_title(self, title: str) -> bool: ...
    """Cheap keyword check on the title alone."""

    def is_relevant(self, title: str, content: str) -> bool: ...
    """Final relevance decision over title and cleaned content."""


@runtime_checkable
class PageGatePort(Protocol):
    def accepts_title(self, title: str) -> bool: ...
    """Stage one, evaluated when the title element closes."""

    def accepts_content(self, title: str, content: str) -> bool: ...
    """Stage two, evaluated when the page element closes."""


@runtime_checkable
class DumpEventSourcePort(Protocol):
    def events(self) -> Iterator[DumpEvent]: ...

    def close(self) -> None: ...
