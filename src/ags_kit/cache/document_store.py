import logging

from ags_kit.buffers.base import TextBuffer
from ags_kit.parsers.base import DocumentParser
from ags_kit.parsers.models import ParsedDocument

from .document_cache import DocumentCache

logger = logging.getLogger(__name__)


class DocumentStore:
    """Parse-on-demand front for a DocumentCache.

    `get` parses on first access only; `parse` always re-parses and
    replaces the cached entry. Hosts call `parse` on every text change.
    """

    def __init__(self, parser: DocumentParser, cache: DocumentCache) -> None:
        self.parser = parser
        self.cache = cache

    def get(self, buffer: TextBuffer) -> ParsedDocument:
        parsed = self.cache.get(buffer.buffer_id)
        if parsed is None:
            parsed = self.parse(buffer)
        return parsed

    def parse(self, buffer: TextBuffer) -> ParsedDocument:
        parsed = self.parser.parse(buffer.lines())
        self.cache.put(buffer.buffer_id, parsed)
        logger.debug(
            "Cached %d groups for %s", len(parsed.groups), buffer.buffer_id
        )
        return parsed

    def close(self, buffer: TextBuffer) -> None:
        self.cache.evict(buffer.buffer_id)
