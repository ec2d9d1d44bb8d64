from typing import Protocol

from .types import CursorPosition, TextEdit


class TextBuffer(Protocol):
    """Line-addressable text owned by the host editor.

    buffer_id identifies the buffer across events (a URI in most hosts).
    """

    buffer_id: str

    def line_count(self) -> int: ...

    def line_at(self, line: int) -> str: ...

    def lines(self) -> list[str]: ...

    def cursor(self) -> CursorPosition: ...

    def move_cursor(self, line: int, character: int = 0) -> None: ...

    def apply_edit(self, edit: TextEdit) -> bool:
        """
        Apply a single edit.
        Returns False when the host rejects it; the text is then unchanged.
        """
        ...
