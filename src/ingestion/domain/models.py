from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DumpEventKind(str, Enum):
    START = "start"
    TEXT = "text"
    END = "end"


@dataclass(frozen=True)
class DumpEvent:
    kind: DumpEventKind
    name: str
    text: str = ""
    attrs: dict[str, str] = field(default_factory=dict)

    @classmethod
    def start(cls, name: str, attrs: dict[str, str] | None = None) -> "DumpEvent":
        return cls(DumpEventKind.START, name, attrs=dict(attrs or {}))

    @classmethod
    def end(cls, name: str) -> "DumpEvent":
        return cls(DumpEventKind.END, name)

    @classmethod
    def text_run(cls, name: str, text: str) -> "DumpEvent":
        return cls(DumpEventKind.TEXT, name, text=text)


@dataclass
class Page:
    title: str = ""
    id: int = 0
    content: str = ""
    redirect: str | None = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "id": self.id,
            "content": self.content,
            "redirect": self.redirect,
        }


@dataclass
class IngestedDump:
    # title -> Page, last occurrence wins
    articles: dict[str, Page] = field(default_factory=dict)
    # redirect title -> target title
    redirects: dict[str, str] = field(default_factory=dict)
    processed_total: int = 0
    capped: bool = False

    def add(self, page: Page) -> None:
        if page.redirect is not None:
            self.redirects[page.title] = page.redirect
        else:
            self.articles[page.title] = page
        self.processed_total += 1


@dataclass(frozen=True)
class IngestSummary:
    processed_total: int
    articles_total: int
    redirects_total: int
    capped: bool
    duration_ms: int
