from __future__ import annotations

import logging
from pathlib import Path

from pyreader.domain.errors import LoadError
from pyreader.domain.interfaces import IDocumentLoader
from pyreader.domain.models import Document
from pyreader.utils.constants import LOAD_ERROR_PREFIX, TEXT_ENCODING

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """
    Split on \\n, \\r\\n and \\r only. Empty lines are kept; one trailing
    terminator does not add an empty last line.
    """
    if not text:
        return []
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def document_key(path: Path) -> str:
    return Path(path).resolve().as_uri()


class DocumentLoader(IDocumentLoader):
    """Single buffered read of a UTF-8 text file into a Document."""

    def __init__(self, encoding: str = TEXT_ENCODING) -> None:
        self.encoding = encoding

    def load(self, path: Path) -> Document:
        path = Path(path)
        try:
            raw = path.read_bytes()
            text = raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise LoadError(
                f"{LOAD_ERROR_PREFIX}{path.name} is not valid {self.encoding} text ({e.reason})",
                path,
            ) from e
        except OSError as e:
            reason = e.strerror or str(e)
            raise LoadError(f"{LOAD_ERROR_PREFIX}{reason}: {path}", path) from e

        lines = split_lines(text)
        logger.info("Loaded %s (%d lines)", path, len(lines))
        return Document(key=document_key(path), lines=tuple(lines))

    def error_document(self, error: Exception) -> Document:
        message = error.message if isinstance(error, LoadError) else f"{LOAD_ERROR_PREFIX}{error}"
        return Document(key=None, lines=(message or LOAD_ERROR_PREFIX.strip(),))
