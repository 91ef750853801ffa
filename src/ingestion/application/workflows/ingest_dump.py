from dataclasses import dataclass
from time import perf_counter
from typing import Callable

from tqdm import tqdm

from src.config.logger_config import logger
from src.ingestion.application.page_assembler import PageAssembler
from src.ingestion.application.ports import DumpEventSourcePort
from src.ingestion.domain.models import IngestedDump, IngestSummary, Page

PROGRESS_LOG_EVERY = 1000


@dataclass(frozen=True)
class IngestWorkflowConfig:
    max_articles: int | None = None
    show_progress: bool = True


class IngestDumpWorkflow:
    """Single sequential pass over one dump.

    Without a handler every accepted article is kept in the returned
    IngestedDump. With a handler (streaming mode) articles are handed over as
    soon as their page closes and are not retained; redirects are always kept.
    """

    def __init__(
        self,
        source: DumpEventSourcePort,
        assembler: PageAssembler,
        config: IngestWorkflowConfig | None = None,
    ) -> None:
        self.source = source
        self.assembler = assembler
        self.config = config or IngestWorkflowConfig()
        self.last_summary: IngestSummary | None = None

    def run(self, article_handler: Callable[[Page], None] | None = None) -> IngestedDump:
        started = perf_counter()
        dump = IngestedDump()
        streamed_articles = 0
        max_articles = self.config.max_articles
        logger.info(
            "Dump ingestion started: max_articles={}, streaming={}",
            max_articles,
            article_handler is not None,
        )

        with tqdm(
            total=max_articles,
            desc="Parsing dump",
            unit=" page",
            leave=True,
            disable=not self.config.show_progress,
        ) as progress:
            for event in self.source.events():
                page = self.assembler.feed(event)
                if page is None:
                    continue

                if page.redirect is None and article_handler is not None:
                    article_handler(page)
                    dump.processed_total += 1
                    streamed_articles += 1
                else:
                    dump.add(page)
                progress.update(1)

                if dump.processed_total % PROGRESS_LOG_EVERY == 0:
                    logger.info("Processed {} articles...", dump.processed_total)
                if max_articles is not None and dump.processed_total >= max_articles:
                    # Stop between pages; the rest of the input is left unread.
                    dump.capped = True
                    break

        articles_total = streamed_articles if article_handler is not None else len(dump.articles)
        self.last_summary = IngestSummary(
            processed_total=dump.processed_total,
            articles_total=articles_total,
            redirects_total=len(dump.redirects),
            capped=dump.capped,
            duration_ms=int((perf_counter() - started) * 1000),
        )
        logger.info(
            "Dump ingestion completed: parsed {} articles and {} redirects, processed_total={}, capped={}, duration_ms={}",
            articles_total,
            len(dump.redirects),
            dump.processed_total,
            dump.capped,
            self.last_summary.duration_ms,
        )
        return dump
