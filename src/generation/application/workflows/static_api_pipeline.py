import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from time import perf_counter
from typing import Any

from tqdm import tqdm

from src.config.logger_config import logger
from src.generation.application import api_catalog
from src.generation.application.article_writer import CollisionResolvingArticleWriter
from src.generation.application.contracts import ResourceResponse, ToolResponse
from src.generation.application.ports import ArticleCategorizerPort, DocumentSinkPort
from src.generation.domain.category_index import CategoryIndex
from src.ingestion.application.ports import TopicFilterPort
from src.ingestion.domain.models import IngestedDump, Page
from src.ingestion.domain.rules import sanitize_filename

PROGRESS_LOG_EVERY = 1000


@dataclass(frozen=True)
class StaticApiConfig:
    language: str = "en"
    topic_filter: TopicFilterPort | None = None
    article_limit: int | None = None
    show_progress: bool = True


@dataclass(frozen=True)
class GenerationSummary:
    total_articles: int
    total_redirects: int
    article_artifacts: int
    total_pages: int
    category_count: int
    collision_actions: dict[str, int] = field(default_factory=dict)
    streaming_mode: bool = False
    generated_at: str = ""
    duration_ms: int = 0


class StaticApiGenerator:
    """Materializes the static query API tree from ingested articles.

    generate() is the in-memory path: every artifact is produced from a fully
    parsed dump. The streaming path calls write_article() while the dump is
    parsed and generate_metadata() once the scan has finished.
    """

    def __init__(
        self,
        sink: DocumentSinkPort,
        writer: CollisionResolvingArticleWriter,
        categorizer: ArticleCategorizerPort,
        config: StaticApiConfig | None = None,
    ) -> None:
        self.sink = sink
        self.writer = writer
        self.categorizer = categorizer
        self.config = config or StaticApiConfig()
        # ordered set of accepted titles
        self.article_titles: dict[str, None] = {}
        self.redirects: dict[str, str] = {}
        self.categories = CategoryIndex()
        self.article_artifacts = 0
        self.sink.ensure_dirs(api_catalog.OUTPUT_DIRS)

    def generate(self, dump: IngestedDump) -> GenerationSummary:
        started = perf_counter()
        logger.info(
            "Static API generation started: articles={}, redirects={}, language={}, article_limit={}",
            len(dump.articles),
            len(dump.redirects),
            self.config.language,
            self.config.article_limit,
        )
        self.redirects.update(dump.redirects)
        for title, page in dump.articles.items():
            self._register(title, page.content)

        limit = len(dump.articles)
        if self.config.article_limit is not None:
            limit = min(self.config.article_limit, limit)
        selected = list(dump.articles.items())[:limit]
        logger.info("Generating {} article responses...", len(selected))
        for i, (title, page) in enumerate(
            tqdm(
                selected,
                total=len(selected),
                desc="Article responses",
                unit="article",
                leave=True,
                disable=not self.config.show_progress,
            ),
            start=1,
        ):
            self.write_article(title, page.content)
            if i % PROGRESS_LOG_EVERY == 0:
                logger.info("Generated {} article responses...", i)

        return self._write_metadata(streaming_mode=False, started=started)

    def write_article(self, title: str, content: str) -> None:
        self._register(title, content)
        self.writer.write(title, content)
        self.article_artifacts += 1

    def handle_page(self, page: Page) -> None:
        """Streaming hook: an accepted, non-redirect page has just closed."""
        self.write_article(page.title, page.content)

    def add_redirects(self, redirects: dict[str, str]) -> None:
        self.redirects.update(redirects)

    def generate_metadata(self) -> GenerationSummary:
        return self._write_metadata(streaming_mode=True, started=perf_counter())

    def _register(self, title: str, content: str) -> None:
        self.article_titles[title] = None
        self.categories.add_all(self.categorizer.categorize(title, content), title)

    def _write_metadata(self, streaming_mode: bool, started: float) -> GenerationSummary:
        generated_at = datetime.now(timezone.utc)
        self.write_manifest()
        self.write_resources(generated_at, streaming_mode=streaming_mode)
        pages = self.write_article_listing()
        self.write_categories()

        summary = GenerationSummary(
            total_articles=len(self.article_titles),
            total_redirects=len(self.redirects),
            article_artifacts=self.article_artifacts,
            total_pages=pages,
            category_count=len(self.categories),
            collision_actions=dict(self.writer.action_counts),
            streaming_mode=streaming_mode,
            generated_at=generated_at.isoformat(),
            duration_ms=int((perf_counter() - started) * 1000),
        )
        logger.info(
            "Static API generation completed: total_articles={}, total_redirects={}, article_artifacts={}, total_pages={}, category_count={}, collision_actions={}, streaming_mode={}, duration_ms={}",
            summary.total_articles,
            summary.total_redirects,
            summary.article_artifacts,
            summary.total_pages,
            summary.category_count,
            summary.collision_actions,
            summary.streaming_mode,
            summary.duration_ms,
        )
        return summary

    def server_name(self) -> str:
        if self.config.topic_filter is not None:
            return self.config.topic_filter.server_name(self.config.language)
        return api_catalog.default_server_name(self.config.language)

    def write_manifest(self) -> None:
        manifest = api_catalog.build_manifest(self.server_name())
        self.sink.write_document(api_catalog.MANIFEST_PATH, manifest.to_dict())

    def write_resources(self, generated_at: datetime, streaming_mode: bool = False) -> None:
        topic_filter = self.config.topic_filter
        stats: dict[str, Any] = {
            "total_articles": len(self.article_titles),
            "total_redirects": len(self.redirects),
            "language": self.config.language,
            "topic_filter": topic_filter.description if topic_filter is not None else None,
            "generated_at": generated_at.strftime(api_catalog.STATS_TIMESTAMP_FORMAT),
        }
        if streaming_mode:
            stats["streaming_mode"] = True
        self.sink.write_document(
            api_catalog.STATS_PATH,
            ResourceResponse(
                uri=api_catalog.STATS_URI,
                mime_type=api_catalog.JSON_MIME_TYPE,
                text=json.dumps(stats, ensure_ascii=False, indent=2),
            ).to_dict(),
        )
        self.sink.write_document(
            api_catalog.ARTICLES_PATH,
            ResourceResponse(
                uri=api_catalog.ARTICLES_URI,
                mime_type=api_catalog.JSON_MIME_TYPE,
                text=json.dumps(list(self.article_titles), ensure_ascii=False, separators=(",", ":")),
            ).to_dict(),
        )

    def write_article_listing(self, per_page: int = api_catalog.ARTICLES_PER_PAGE) -> int:
        titles = list(self.article_titles)
        pages = api_catalog.total_pages(len(titles), per_page)
        for page in range(1, pages + 1):
            start = (page - 1) * per_page
            payload = {
                "pagination": {
                    "current_page": page,
                    "total_pages": pages,
                    "per_page": per_page,
                    "total_articles": len(titles),
                },
                "articles": titles[start : start + per_page],
            }
            self._write_tool_text(f"{api_catalog.LIST_ARTICLES_DIR}/{page}.json", payload)

        metadata = {
            "pagination": {
                "current_page": None,
                "total_pages": pages,
                "per_page": per_page,
                "total_articles": len(titles),
            },
            "message": f"Use /list_articles/{{page}}.json to get specific pages (1-{pages})",
        }
        self._write_tool_text(api_catalog.LIST_ARTICLES_PATH, metadata)
        return pages

    def write_categories(self) -> None:
        filenames = category_filenames(self.categories.names())
        self._write_tool_text(
            api_catalog.LIST_CATEGORIES_PATH,
            {"categories": self.categories.names(), "files": filenames},
        )
        for category, titles in self.categories.items():
            if not titles:
                continue
            payload = {"category": category, "articles": titles, "count": len(titles)}
            self._write_tool_text(f"{api_catalog.CATEGORY_DIR}/{filenames[category]}.json", payload)

    def _write_tool_text(self, relative_path: str, payload: dict[str, Any]) -> None:
        text = json.dumps(payload, ensure_ascii=False, indent=2)
        self.sink.write_document(relative_path, ToolResponse(text=text).to_dict())


def category_filenames(categories: list[str]) -> dict[str, str]:
    """category name -> unique file stem under tools/categories.

    Names that sanitize to an already used stem (compared case-insensitively)
    get a "~2", "~3", ... suffix in processing order.
    """
    filenames: dict[str, str] = {}
    taken: set[str] = set()
    for category in categories:
        base = sanitize_filename(category)
        candidate = base
        n = 2
        while candidate.lower() in taken:
            candidate = f"{base}~{n}"
            n += 1
        if candidate != base:
            logger.debug("Category filename clash resolved: category={}, filename={}", category, candidate)
        taken.add(candidate.lower())
        filenames[category] = candidate
    return filenames
