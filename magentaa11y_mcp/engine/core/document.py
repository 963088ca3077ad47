"""Document storage for the content engine.

Reads component markdown documents from the content root and splits them
into YAML front-matter and markdown body. Nothing is cached: every read
goes back to the file system. Undecodable bytes are replaced rather than
failing the read.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import DocumentNotFoundError

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---"
BYTE_ORDER_MARK = "\ufeff"


@dataclass
class ParsedDocument:
    """A document split into its front-matter header and markdown body.

    Attributes:
        front_matter: Parsed YAML header (empty when the document has none)
        body: Markdown body with the header removed
    """

    front_matter: dict[str, Any] = field(default_factory=dict)
    body: str = ""


def parse_front_matter(text: str, source: str = "<string>") -> ParsedDocument:
    """Split a markdown document into front-matter and body.

    The header must start on the first line with a ``---`` line and end at
    the next ``---`` line. A leading byte-order mark is dropped. A document
    without a header is all body.

    Args:
        text: Full document text
        source: Document name used in log messages

    Returns:
        ParsedDocument with the header mapping and the remaining body
    """
    text = text.removeprefix(BYTE_ORDER_MARK)
    lines = text.split("\n")
    if not lines or lines[0].rstrip() != FRONT_MATTER_DELIMITER:
        return ParsedDocument(front_matter={}, body=text)

    closing = None
    for i in range(1, len(lines)):
        if lines[i].rstrip() == FRONT_MATTER_DELIMITER:
            closing = i
            break

    if closing is None:
        return ParsedDocument(front_matter={}, body=text)

    header = "\n".join(lines[1:closing])
    body = "\n".join(lines[closing + 1 :])

    try:
        data = yaml.safe_load(header) if header.strip() else {}
    except yaml.YAMLError as e:
        logger.warning(f"Malformed front-matter in {source}: {e}")
        return ParsedDocument(front_matter={}, body=body)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        logger.warning(f"Front-matter in {source} is not a mapping, ignoring it")
        data = {}

    return ParsedDocument(front_matter=data, body=body)


class DocumentStore:
    """Reads component documents relative to the content root."""

    def __init__(self, content_root: Path | str):
        self.content_root = Path(content_root)

    def resolve(self, platform: str, relative_path: str) -> Path:
        """Resolve a content-root-relative path, confined to the platform directory.

        Raises:
            DocumentNotFoundError: If the path escapes the platform directory
                or is not a file
        """
        platform_dir = (self.content_root / platform).resolve()
        candidate = (self.content_root / relative_path).resolve()
        if not candidate.is_relative_to(platform_dir) or not candidate.is_file():
            raise DocumentNotFoundError(relative_path)
        return candidate

    async def read(self, platform: str, relative_path: str) -> ParsedDocument:
        """Read and parse a document.

        Args:
            platform: Platform directory the document must live under
            relative_path: Path relative to the content root

        Returns:
            ParsedDocument for the file

        Raises:
            DocumentNotFoundError: If the path does not resolve to a document
        """
        path = self.resolve(platform, relative_path)
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8", errors="replace")
        except FileNotFoundError as e:
            raise DocumentNotFoundError(relative_path) from e
        return parse_front_matter(text, source=relative_path)
