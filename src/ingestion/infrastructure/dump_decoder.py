"""
Stream a MediaWiki pages-articles export (.xml or .xml.bz2) as structural
events without loading the document into memory.
"""

import bz2
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO, Iterator

from src.ingestion.application.ports import DumpEventSourcePort
from src.ingestion.domain.errors import DumpParseError, UnsupportedDumpFormatError
from src.ingestion.domain.models import DumpEvent
from src.ingestion.domain.rules import SUPPORTED_DUMP_SUFFIXES


def _local_tag(tag: str) -> str:
    """Drop the export namespace, e.g. '{http://www.mediawiki.org/xml/export-0.11/}page' -> 'page'."""
    return tag.split("}")[-1] if tag and "}" in str(tag) else (tag or "")


def is_compressed_path(path: Path) -> bool:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_DUMP_SUFFIXES:
        raise UnsupportedDumpFormatError(f"Unsupported file format: {path.name}. Use .xml or .bz2 files.")
    return suffix == ".bz2"


class DumpDecoder(DumpEventSourcePort):
    def __init__(self, stream: BinaryIO, compressed: bool = False, owns_stream: bool = False) -> None:
        self._raw = stream
        self._owns_stream = owns_stream
        self._stream: BinaryIO = bz2.BZ2File(stream) if compressed else stream
        self.compressed = compressed

    @classmethod
    def from_path(cls, path: str | Path) -> "DumpDecoder":
        dump_path = Path(path)
        compressed = is_compressed_path(dump_path)
        return cls(dump_path.open("rb"), compressed=compressed, owns_stream=True)

    def events(self) -> Iterator[DumpEvent]:
        """Yield start / text / end events in document order.

        Text runs are trimmed and emitted right before the end event of the
        element that holds them. Finished subtrees are cleared as soon as
        they close.
        """
        root: ET.Element | None = None
        depth = 0
        try:
            for event, elem in ET.iterparse(self._stream, events=("start", "end")):
                name = _local_tag(elem.tag)
                if event == "start":
                    if root is None:
                        root = elem
                    depth += 1
                    yield DumpEvent.start(name, {_local_tag(k): v for k, v in elem.attrib.items()})
                    continue

                depth -= 1
                text = (elem.text or "").strip()
                if text:
                    yield DumpEvent.text_run(name, text)
                yield DumpEvent.end(name)
                elem.clear()
                if depth == 1 and root is not None:
                    # direct child of the root (a page) is done; drop it from the tree
                    root.clear()
        except ET.ParseError as exc:
            raise DumpParseError(f"Malformed dump markup: {exc}") from exc
        except (OSError, EOFError) as exc:
            raise DumpParseError(f"Malformed compressed stream: {exc}") from exc

    def close(self) -> None:
        if self._stream is not self._raw:
            self._stream.close()
        if self._owns_stream:
            self._raw.close()

    def __enter__(self) -> "DumpDecoder":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
