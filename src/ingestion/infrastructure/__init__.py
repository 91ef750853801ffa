"""Infrastructure adapters for ingestion."""

from src.ingestion.infrastructure.dump_decoder import DumpDecoder, is_compressed_path

__all__ = ["DumpDecoder", "is_compressed_path"]
