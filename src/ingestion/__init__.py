"""Ingestion package."""

from src.ingestion.application.workflows.ingest_dump import IngestDumpWorkflow, IngestWorkflowConfig
from src.ingestion.domain.models import IngestedDump, IngestSummary, Page

__all__ = [
    "IngestDumpWorkflow",
    "IngestedDump",
    "IngestSummary",
    "IngestWorkflowConfig",
    "Page",
]
