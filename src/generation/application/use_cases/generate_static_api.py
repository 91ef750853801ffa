from dataclasses import dataclass

from src.config.logger_config import logger
from src.generation.application.workflows.static_api_pipeline import GenerationSummary, StaticApiGenerator
from src.ingestion.application.workflows.ingest_dump import IngestDumpWorkflow


@dataclass(frozen=True)
class GenerateStaticApiCommand:
    input_path: str
    output_path: str
    streaming: bool = False


@dataclass(frozen=True)
class GenerateStaticApiResult:
    total_articles: int
    total_redirects: int
    article_artifacts: int
    total_pages: int
    category_count: int
    processed_total: int
    capped: bool
    streaming_mode: bool


class GenerateStaticApiUseCase:
    def __init__(self, ingest: IngestDumpWorkflow, generator: StaticApiGenerator) -> None:
        self.ingest = ingest
        self.generator = generator

    def execute(self, command: GenerateStaticApiCommand) -> GenerateStaticApiResult:
        logger.info(
            "Static API use case started: input_path={}, output_path={}, streaming={}",
            command.input_path,
            command.output_path,
            command.streaming,
        )
        if command.streaming:
            dump = self.ingest.run(article_handler=self.generator.handle_page)
            self.generator.add_redirects(dump.redirects)
            summary: GenerationSummary = self.generator.generate_metadata()
        else:
            dump = self.ingest.run()
            summary = self.generator.generate(dump)

        logger.info(
            "Static API use case completed: total_articles={}, total_redirects={}, article_artifacts={}, total_pages={}",
            summary.total_articles,
            summary.total_redirects,
            summary.article_artifacts,
            summary.total_pages,
        )
        return GenerateStaticApiResult(
            total_articles=summary.total_articles,
            total_redirects=summary.total_redirects,
            article_artifacts=summary.article_artifacts,
            total_pages=summary.total_pages,
            category_count=summary.category_count,
            processed_total=dump.processed_total,
            capped=dump.capped,
            streaming_mode=summary.streaming_mode,
        )
