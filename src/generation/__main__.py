from dataclasses import replace
from pathlib import Path

import click

from src.config.settings import settings_from_env
from src.generation.domain.categorizer import KeywordCategorizer, NoCategorizer
from src.generation.generate import run_generate
from src.ingestion.domain.errors import UnknownTopicFilterError, UnsupportedDumpFormatError
from src.ingestion.domain.topic_filters import TOPIC_FILTERS


@click.command(name="generate")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_path", type=click.Path(file_okay=False, path_type=Path))
@click.option("--language", default=None, help="Dump language code (default: en).")
@click.option("--max-articles", type=int, default=None, help="Stop the scan after this many accepted pages.")
@click.option(
    "--topic-filter",
    type=click.Choice(sorted(TOPIC_FILTERS), case_sensitive=False),
    default=None,
    help="Only keep articles relevant to this topic.",
)
@click.option("--article-limit", type=int, default=None, help="Write at most this many per-article documents.")
@click.option("--streaming/--in-memory", default=None, help="Write articles while the dump is parsed.")
@click.option("--categorize/--no-categorize", default=False, show_default=True, help="Use the keyword categorizer.")
@click.option("--no-progress", is_flag=True, default=False, help="Disable progress bars.")
def main(
    input_path: Path,
    output_path: Path,
    language: str | None,
    max_articles: int | None,
    topic_filter: str | None,
    article_limit: int | None,
    streaming: bool | None,
    categorize: bool,
    no_progress: bool,
) -> None:
    """Convert a Wikipedia dump (.xml or .bz2) into a static MCP file tree."""
    base = settings_from_env()
    settings = replace(
        base,
        input_path=input_path,
        output_path=output_path,
        language=language or base.language,
        max_articles=max_articles if max_articles is not None else base.max_articles,
        topic_filter=topic_filter or base.topic_filter,
        article_limit=article_limit if article_limit is not None else base.article_limit,
        streaming=base.streaming if streaming is None else streaming,
        show_progress=not no_progress,
    )
    categorizer = KeywordCategorizer() if categorize else NoCategorizer()
    try:
        result = run_generate(settings, categorizer=categorizer)
    except (UnsupportedDumpFormatError, UnknownTopicFilterError) as exc:
        raise click.UsageError(str(exc)) from exc
    click.echo(
        f"Generated {result.total_articles} articles, {result.total_redirects} redirects, "
        f"{result.total_pages} listing pages into {output_path}"
    )


# python -m src.generation INPUT OUTPUT
if __name__ == "__main__":
    main()
