import re
from dataclasses import dataclass, field
from enum import Enum

# Measured in UTF-8 bytes, not characters.
SHORT_ARTICLE_THRESHOLD = 1000
UNKNOWN_TITLE = "Unknown"

INDEX_HEADER = "Multiple articles found. Choose the one you need:\n\n"
MERGE_DIVIDER = "\n\n---\n\n"
_INDEX_ENTRY_RE = re.compile(r"^• \*\*.*\*\* - Use get_article tool with title '(.*)'$")


class BodyKind(str, Enum):
    SINGLE = "single"
    MERGED = "merged"
    INDEX = "index"


class WriteAction(str, Enum):
    CREATED = "created"
    REPLACED = "replaced"
    MERGED = "merged"
    ESCALATED = "escalated"
    INDEX_EXTENDED = "index_extended"


@dataclass(frozen=True)
class Section:
    title: str
    content: str


@dataclass(frozen=True)
class ArticleBody:
    """Parsed view of the text stored in one per-article artifact."""

    kind: BodyKind
    sections: tuple[Section, ...] = ()
    index_titles: tuple[str, ...] = ()

    @property
    def titles(self) -> tuple[str, ...]:
        if self.kind is BodyKind.INDEX:
            return self.index_titles
        return tuple(s.title for s in self.sections)


@dataclass(frozen=True)
class WritePlan:
    """What the writer has to persist for one incoming article.

    base_text replaces the un-suffixed artifact when set; siblings maps an
    ordinal to the full text of the numbered artifact with that suffix.
    """

    action: WriteAction
    base_text: str | None = None
    siblings: dict[int, str] = field(default_factory=dict)


def render_article(title: str, content: str) -> str:
    return f"# {title}\n\n{content}"


def render_index_entry(title: str) -> str:
    return f"• **{title}** - Use get_article tool with title '{title}'\n"


def render_index(titles: tuple[str, ...] | list[str]) -> str:
    return INDEX_HEADER + "".join(render_index_entry(t) for t in titles)


def render_merged(sections: tuple[Section, ...] | list[Section]) -> str:
    first, *rest = sections
    text = render_article(first.title, first.content)
    for section in rest:
        text += f"{MERGE_DIVIDER}## {section.title}\n\n{section.content}"
    return text


def is_short(text: str) -> bool:
    return len(text.encode("utf-8")) <= SHORT_ARTICLE_THRESHOLD


def is_index_text(text: str) -> bool:
    return text.startswith("Multiple articles found")


def extract_title(text: str) -> str:
    if not text.startswith("# "):
        return UNKNOWN_TITLE
    first_line = text.split("\n", 1)[0]
    return first_line[2:]


def parse_body(text: str) -> ArticleBody:
    """Classify stored text as a disambiguation index, a merged document or a single article.

    Cleaned article content never holds blank lines, so the divider cannot
    appear inside a section.
    """
    if is_index_text(text):
        titles = []
        for line in text.splitlines():
            match = _INDEX_ENTRY_RE.match(line)
            if match:
                titles.append(match.group(1))
        return ArticleBody(kind=BodyKind.INDEX, index_titles=tuple(titles))

    chunks = text.split(f"{MERGE_DIVIDER}## ")
    sections = [_parse_section(chunks[0], heading="# ")]
    sections.extend(_parse_section(chunk, heading="") for chunk in chunks[1:])
    kind = BodyKind.MERGED if len(sections) > 1 else BodyKind.SINGLE
    return ArticleBody(kind=kind, sections=tuple(sections))


def _parse_section(chunk: str, heading: str) -> Section:
    if heading and not chunk.startswith(heading):
        return Section(title=UNKNOWN_TITLE, content=chunk)
    head, _, content = chunk[len(heading):].partition("\n\n")
    return Section(title=head, content=content)


def plan_write(existing_text: str | None, title: str, content: str) -> WritePlan:
    """Decide how one (title, content) pair lands on an encoded filename.

    - nothing stored yet: fresh single article
    - stored text is an index: add a bullet (unless already listed) and
      write the title's numbered sibling at its position in the index
    - stored single/merged body and the title is already part of it:
      replace that title's content in place
    - both the stored text and the new content are short: merge them as
      sections divided by "---"
    - otherwise: the base becomes an index of every title involved and each
      one gets a numbered sibling holding its full content
    """
    if existing_text is None:
        return WritePlan(action=WriteAction.CREATED, base_text=render_article(title, content))

    body = parse_body(existing_text)
    if body.kind is BodyKind.INDEX:
        titles = list(body.index_titles)
        if title in titles:
            ordinal = titles.index(title) + 1
            return WritePlan(
                action=WriteAction.REPLACED,
                siblings={ordinal: render_article(title, content)},
            )
        titles.append(title)
        return WritePlan(
            action=WriteAction.INDEX_EXTENDED,
            base_text=existing_text + render_index_entry(title),
            siblings={len(titles): render_article(title, content)},
        )

    existing_titles = [s.title for s in body.sections]
    if title in existing_titles:
        sections = [Section(title, content) if s.title == title else s for s in body.sections]
        return WritePlan(action=WriteAction.REPLACED, base_text=render_merged(sections))

    if is_short(existing_text) and is_short(content):
        return WritePlan(
            action=WriteAction.MERGED,
            base_text=existing_text + f"{MERGE_DIVIDER}## {title}\n\n{content}",
        )

    sections = list(body.sections) + [Section(title, content)]
    return WritePlan(
        action=WriteAction.ESCALATED,
        base_text=render_index([s.title for s in sections]),
        siblings={i: render_article(s.title, s.content) for i, s in enumerate(sections, start=1)},
    )
