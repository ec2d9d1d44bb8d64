import logging

from ags_kit.observability import names
from ags_kit.observability.base import MetricsHook, NoOpMetricsHook
from ags_kit.parsers.models import ParsedDocument

logger = logging.getLogger(__name__)


class DocumentCache:
    """Parsed documents keyed by buffer identity.

    Entries are replaced wholesale, never patched.
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self._documents: dict[str, ParsedDocument] = {}
        self.metrics_hook = metrics_hook

    def get(self, buffer_id: str) -> ParsedDocument | None:
        return self._documents.get(buffer_id)

    def put(self, buffer_id: str, parsed: ParsedDocument) -> None:
        self._documents[buffer_id] = parsed

    def evict(self, buffer_id: str) -> None:
        if self._documents.pop(buffer_id, None) is not None:
            self.metrics_hook.increment(names.CACHE_EVICTIONS_TOTAL)
            logger.debug("Evicted parsed document for %s", buffer_id)

    def clear(self) -> None:
        self._documents.clear()

    def __contains__(self, buffer_id: object) -> bool:
        return buffer_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)
