from dataclasses import dataclass


@dataclass(frozen=True)
class TextEdit:
    """Replacement of a character span on one line."""

    line: int
    start_character: int
    end_character: int
    new_text: str


@dataclass(frozen=True)
class CursorPosition:
    line: int
    character: int = 0
