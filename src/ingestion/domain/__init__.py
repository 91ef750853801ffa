"""Domain models and deterministic rules for ingestion."""

from src.ingestion.domain.models import DumpEvent, DumpEventKind, IngestedDump, Page
from src.ingestion.domain.rules import encode_filename, is_namespaced_title, sanitize_filename
from src.ingestion.domain.topic_filters import TOPIC_FILTERS, TopicFilter, get_topic_filter
from src.ingestion.domain.wikitext import clean_wikitext

__all__ = [
    "clean_wikitext",
    "DumpEvent",
    "DumpEventKind",
    "encode_filename",
    "get_topic_filter",
    "IngestedDump",
    "is_namespaced_title",
    "Page",
    "sanitize_filename",
    "TOPIC_FILTERS",
    "TopicFilter",
]
