from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ArtifactStorePort(Protocol):
    """Single-writer key/value view over the per-article output namespace."""

    def get(self, key: str) -> str | None: ...
    """Return the text stored under key, or None when nothing was written yet."""

    def put(self, key: str, text: str) -> None: ...
    """Create or overwrite the artifact stored under key."""


@runtime_checkable
class ArticleCategorizerPort(Protocol):
    def categorize(self, title: str, content: str) -> list[str]: ...
    """Return zero or more category names for one article."""


@runtime_checkable
class DocumentSinkPort(Protocol):
    def ensure_dirs(self, relative_dirs: tuple[str, ...]) -> None: ...

    def write_document(self, relative_path: str, payload: dict[str, Any]) -> None: ...
    """Persist one JSON document under the output root."""
