import re
import unicodedata
from dataclasses import dataclass
from functools import cached_property
from typing import Pattern

from src.ingestion.domain.errors import UnknownTopicFilterError

# Titles disambiguated into another medium are off-topic even when the bare
# name carries a keyword, e.g. "Star Wars (film)" for history.
MEDIA_MARKERS: tuple[str, ...] = (
    "(film)",
    "(album)",
    "(song)",
    "(band)",
    "(video game)",
    "(tv series)",
    "(novel)",
)

MIN_CONTENT_KEYWORD_HITS = 2


@dataclass(frozen=True)
class TopicFilter:
    name: str
    display_name: str
    description: str
    keywords: tuple[str, ...]
    excluded_markers: tuple[str, ...] = MEDIA_MARKERS
    min_content_hits: int = MIN_CONTENT_KEYWORD_HITS

    def server_name(self, language: str) -> str:
        return f"Wikipedia {language.upper()} {self.display_name} StaticMCP"

    def matches_title(self, title: str) -> bool:
        title_lower = title.lower()
        return any(keyword in title_lower for keyword in self.keywords)

    def is_relevant(self, title: str, content: str) -> bool:
        title_lower = (title or "").lower()
        if any(marker in title_lower for marker in self.excluded_markers):
            return False
        if self._keyword_hits(title):
            return True
        return len(self._keyword_hits(content)) >= self.min_content_hits

    @cached_property
    def _keyword_pattern(self) -> Pattern[str]:
        alternatives = "|".join(re.escape(k) for k in sorted(self.keywords, key=len, reverse=True))
        return re.compile(rf"\b(?:{alternatives})(?:s|es)?\b")

    def _keyword_hits(self, text: str) -> set[str]:
        normalized = _normalize_for_matching(text or "")
        return {m.group(0) for m in self._keyword_pattern.finditer(normalized)}


def _normalize_for_matching(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return re.sub(r"[\W_]+", " ", stripped.lower())


HISTORY = TopicFilter(
    name="history",
    display_name="History",
    description="Historical Events, Figures, and Civilizations",
    keywords=(
        "history",
        "historical",
        "war",
        "battle",
        "empire",
        "dynasty",
        "kingdom",
        "revolution",
        "ancient",
        "medieval",
        "civilization",
        "treaty",
        "colonial",
        "monarchy",
        "emperor",
        "pharaoh",
        "crusade",
        "siege",
        "archaeology",
        "renaissance",
        "independence",
        "conquest",
        "rebellion",
    ),
)

TECHNOLOGY = TopicFilter(
    name="technology",
    display_name="Technology",
    description="Computing, Software, and Engineering",
    keywords=(
        "computer",
        "computing",
        "software",
        "hardware",
        "programming",
        "internet",
        "algorithm",
        "network",
        "technology",
        "engineering",
        "electronics",
        "robot",
        "database",
        "semiconductor",
        "telecommunication",
        "digital",
        "cryptography",
    ),
)

SCIENCE = TopicFilter(
    name="science",
    display_name="Science",
    description="Natural Sciences and Scientific Discoveries",
    keywords=(
        "science",
        "scientific",
        "physics",
        "biology",
        "chemistry",
        "astronomy",
        "geology",
        "genetics",
        "evolution",
        "molecule",
        "atom",
        "quantum",
        "ecology",
        "species",
        "experiment",
    ),
)

MATHEMATICS = TopicFilter(
    name="mathematics",
    display_name="Mathematics",
    description="Mathematical Concepts, Theorems, and Fields",
    keywords=(
        "mathematics",
        "mathematical",
        "theorem",
        "algebra",
        "geometry",
        "calculus",
        "equation",
        "topology",
        "number theory",
        "probability",
        "arithmetic",
        "matrix",
        "integral",
        "lemma",
    ),
)

GEOGRAPHY = TopicFilter(
    name="geography",
    display_name="Geography",
    description="Places, Landforms, and Regions of the World",
    keywords=(
        "geography",
        "river",
        "mountain",
        "island",
        "lake",
        "ocean",
        "country",
        "continent",
        "region",
        "desert",
        "valley",
        "province",
        "climate",
    ),
)

ARTS = TopicFilter(
    name="arts",
    display_name="Arts",
    description="Visual Arts, Music, Literature, and Performance",
    keywords=(
        "art",
        "painting",
        "sculpture",
        "music",
        "literature",
        "poetry",
        "theatre",
        "theater",
        "opera",
        "architecture",
        "dance",
        "artist",
        "composer",
        "painter",
    ),
    excluded_markers=("(software)", "(programming language)"),
)

TOPIC_FILTERS: dict[str, TopicFilter] = {
    f.name: f for f in (HISTORY, TECHNOLOGY, SCIENCE, MATHEMATICS, GEOGRAPHY, ARTS)
}


def get_topic_filter(name: str | None) -> TopicFilter | None:
    if name is None or not name.strip():
        return None
    try:
        return TOPIC_FILTERS[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(TOPIC_FILTERS))
        raise UnknownTopicFilterError(f"Unknown topic filter: {name} (known: {known})") from None
