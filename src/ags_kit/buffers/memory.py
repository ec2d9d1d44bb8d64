"""Plain in-process text buffer, used by headless hosts and in tests."""

import logging
import re
from itertools import count

from .base import TextBuffer
from .types import CursorPosition, TextEdit

logger = logging.getLogger(__name__)

_anonymous_ids = count(1)

# Only LF and CRLF end a line; other Unicode separators stay inside it.
NEWLINE_RE = re.compile(r"\r?\n")


class InMemoryBuffer(TextBuffer):
    """Text buffer backed by a list of lines.

    Line terminators are not stored; `text()` joins with the newline style
    detected on construction.

    Example:
        >>> buffer = InMemoryBuffer('"GROUP","PROJ"\\n"HEADING","PROJ_ID"')
        >>> buffer.line_at(1)
        '"HEADING","PROJ_ID"'
    """

    def __init__(self, text: str = "", buffer_id: str | None = None) -> None:
        self.buffer_id = buffer_id or f"untitled:{next(_anonymous_ids)}"
        self._newline = "\r\n" if "\r\n" in text else "\n"
        self._lines = NEWLINE_RE.split(text)
        self._cursor = CursorPosition(line=0)
        self.version = 0

    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, line: int) -> str:
        return self._lines[line]

    def lines(self) -> list[str]:
        # return a shallow copy to avoid mutation
        return list(self._lines)

    def text(self) -> str:
        return self._newline.join(self._lines)

    def cursor(self) -> CursorPosition:
        return self._cursor

    def move_cursor(self, line: int, character: int = 0) -> None:
        line = min(max(line, 0), len(self._lines) - 1)
        character = min(max(character, 0), len(self._lines[line]))
        self._cursor = CursorPosition(line=line, character=character)

    def apply_edit(self, edit: TextEdit) -> bool:
        if not 0 <= edit.line < len(self._lines):
            logger.warning("Rejected edit on line %d of %s", edit.line, self.buffer_id)
            return False

        text = self._lines[edit.line]
        if not 0 <= edit.start_character <= edit.end_character <= len(text):
            logger.warning(
                "Rejected edit span %d-%d on line %d of %s",
                edit.start_character,
                edit.end_character,
                edit.line,
                self.buffer_id,
            )
            return False

        replaced = text[: edit.start_character] + edit.new_text + text[edit.end_character :]
        self._lines[edit.line : edit.line + 1] = NEWLINE_RE.split(replaced)
        self.version += 1
        return True
