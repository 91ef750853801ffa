import json
from pathlib import Path

from src.generation.application.contracts import ToolResponse
from src.generation.application.ports import ArtifactStorePort


class JsonToolResponseStore(ArtifactStorePort):
    """Stores each artifact as <key>.json holding a single text content block."""

    def __init__(self, output_dir: str | Path) -> None:
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        return self.output_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        file_path = self.path_for(key)
        if not file_path.exists():
            return None
        with file_path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
        return ToolResponse.from_dict(payload).text

    def put(self, key: str, text: str) -> None:
        with self.path_for(key).open("w", encoding="utf-8") as f:
            json.dump(ToolResponse(text=text).to_dict(), f, ensure_ascii=False, indent=2)
