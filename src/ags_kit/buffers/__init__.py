from .base import TextBuffer
from .memory import InMemoryBuffer
from .types import CursorPosition, TextEdit

__all__ = [
    "CursorPosition",
    "InMemoryBuffer",
    "TextBuffer",
    "TextEdit",
]
