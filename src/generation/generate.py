from pathlib import Path

from src.config.logger_config import logger
from src.config.settings import GeneratorSettings
from src.generation.application import api_catalog
from src.generation.application.article_writer import CollisionResolvingArticleWriter
from src.generation.application.ports import ArticleCategorizerPort
from src.generation.application.use_cases.generate_static_api import (
    GenerateStaticApiCommand,
    GenerateStaticApiResult,
    GenerateStaticApiUseCase,
)
from src.generation.application.workflows.static_api_pipeline import StaticApiConfig, StaticApiGenerator
from src.generation.domain.categorizer import NoCategorizer
from src.generation.infrastructure.sinks.json_document_sink import JsonDocumentSink
from src.generation.infrastructure.stores.tool_response_store import JsonToolResponseStore
from src.ingestion.application.page_assembler import PageAssembler
from src.ingestion.application.relevance_gate import RelevanceGate
from src.ingestion.application.workflows.ingest_dump import IngestDumpWorkflow, IngestWorkflowConfig
from src.ingestion.domain.topic_filters import get_topic_filter
from src.ingestion.infrastructure.dump_decoder import DumpDecoder, is_compressed_path


def run_generate(
    settings: GeneratorSettings,
    categorizer: ArticleCategorizerPort | None = None,
) -> GenerateStaticApiResult:
    input_path = Path(settings.input_path)
    output_path = Path(settings.output_path)
    # Both checks run before the dump is opened.
    is_compressed_path(input_path)
    topic_filter = get_topic_filter(settings.topic_filter)

    logger.info(
        "Generate started: input_path={}, output_path={}, language={}, topic_filter={}, max_articles={}, article_limit={}, streaming={}",
        str(input_path),
        str(output_path),
        settings.language,
        topic_filter.name if topic_filter is not None else None,
        settings.max_articles,
        settings.article_limit,
        settings.streaming,
    )

    sink = JsonDocumentSink(output_path)
    store = JsonToolResponseStore(output_path / api_catalog.ARTICLE_DIR)
    generator = StaticApiGenerator(
        sink=sink,
        writer=CollisionResolvingArticleWriter(store),
        categorizer=categorizer or NoCategorizer(),
        config=StaticApiConfig(
            language=settings.language,
            topic_filter=topic_filter,
            article_limit=settings.article_limit,
            show_progress=settings.show_progress,
        ),
    )

    with DumpDecoder.from_path(input_path) as decoder:
        ingest = IngestDumpWorkflow(
            source=decoder,
            assembler=PageAssembler(gate=RelevanceGate(topic_filter)),
            config=IngestWorkflowConfig(
                max_articles=settings.max_articles,
                show_progress=settings.show_progress,
            ),
        )
        use_case = GenerateStaticApiUseCase(ingest=ingest, generator=generator)
        result = use_case.execute(
            GenerateStaticApiCommand(
                input_path=str(input_path),
                output_path=str(output_path),
                streaming=settings.streaming,
            )
        )

    logger.info("Generated StaticMCP files in: {}", str(output_path))
    return result
