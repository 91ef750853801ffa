# Runtime settings for the static API generator

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_INPUT_PATH = Path("data/pages-articles.xml.bz2")
DEFAULT_OUTPUT_PATH = Path("artifacts/staticmcp")
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class GeneratorSettings:
    input_path: Path = DEFAULT_INPUT_PATH
    output_path: Path = DEFAULT_OUTPUT_PATH
    language: str = DEFAULT_LANGUAGE
    max_articles: int | None = None
    topic_filter: str | None = None
    # None writes every article; the preview mode of older builds used 100.
    article_limit: int | None = None
    streaming: bool = False
    show_progress: bool = True


def settings_from_env() -> GeneratorSettings:
    return GeneratorSettings(
        input_path=Path(os.getenv("STATICMCP_INPUT", str(DEFAULT_INPUT_PATH))),
        output_path=Path(os.getenv("STATICMCP_OUTPUT", str(DEFAULT_OUTPUT_PATH))),
        language=os.getenv("STATICMCP_LANGUAGE", DEFAULT_LANGUAGE),
        max_articles=_optional_int("STATICMCP_MAX_ARTICLES"),
        topic_filter=os.getenv("STATICMCP_TOPIC_FILTER") or None,
        article_limit=_optional_int("STATICMCP_ARTICLE_LIMIT"),
        streaming=_flag("STATICMCP_STREAMING"),
    )


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")
