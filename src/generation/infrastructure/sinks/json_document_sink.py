import json
from pathlib import Path
from typing import Any

from src.config.logger_config import logger
from src.generation.application.ports import DocumentSinkPort


class JsonDocumentSink(DocumentSinkPort):
    def __init__(self, output_root: str | Path) -> None:
        self.output_root = Path(output_root)
        self.output_root.mkdir(parents=True, exist_ok=True)
        self.written_count = 0

    def ensure_dirs(self, relative_dirs: tuple[str, ...]) -> None:
        for relative in relative_dirs:
            (self.output_root / relative).mkdir(parents=True, exist_ok=True)

    def write_document(self, relative_path: str, payload: dict[str, Any]) -> None:
        file_path = self.output_root / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        self.written_count += 1
        logger.debug("Document written: path={}", str(file_path))
