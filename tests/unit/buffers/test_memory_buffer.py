from ags_kit.buffers import CursorPosition, InMemoryBuffer, TextEdit


class TestInMemoryBuffer:
    def test_lines(self) -> None:
        buffer = InMemoryBuffer('"GROUP","PROJ"\n"HEADING","PROJ_ID"')

        assert buffer.line_count() == 2
        assert buffer.line_at(1) == '"HEADING","PROJ_ID"'

    def test_trailing_newline_round_trips(self) -> None:
        text = '"GROUP","PROJ"\n"HEADING","PROJ_ID"\n'
        buffer = InMemoryBuffer(text)

        assert buffer.lines() == ['"GROUP","PROJ"', '"HEADING","PROJ_ID"', ""]
        assert buffer.text() == text

    def test_unicode_separators_stay_in_line(self) -> None:
        text = '"GROUP","XSIT"\n"DATA","a\u2028b\x0cc\x85d"'
        buffer = InMemoryBuffer(text)

        assert buffer.line_count() == 2
        assert buffer.line_at(1) == '"DATA","a\u2028b\x0cc\x85d"'
        assert buffer.text() == text

    def test_crlf_text_with_trailing_newline(self) -> None:
        buffer = InMemoryBuffer('"GROUP","PROJ"\r\n"DATA","P1"\r\n')

        assert buffer.line_count() == 3
        assert buffer.text() == '"GROUP","PROJ"\r\n"DATA","P1"\r\n'

    def test_empty_text_has_one_line(self) -> None:
        buffer = InMemoryBuffer()

        assert buffer.lines() == [""]

    def test_keeps_crlf_newlines(self) -> None:
        buffer = InMemoryBuffer('"GROUP","PROJ"\r\n"DATA","P1"')

        assert buffer.line_at(0) == '"GROUP","PROJ"'
        assert buffer.text() == '"GROUP","PROJ"\r\n"DATA","P1"'

    def test_lines_returns_copy(self) -> None:
        buffer = InMemoryBuffer("a\nb")

        buffer.lines().append("c")

        assert buffer.line_count() == 2

    def test_anonymous_ids_are_unique(self) -> None:
        assert InMemoryBuffer().buffer_id != InMemoryBuffer().buffer_id

    def test_explicit_id(self) -> None:
        assert InMemoryBuffer(buffer_id="file:///x.ags").buffer_id == "file:///x.ags"


class TestCursor:
    def test_starts_at_origin(self) -> None:
        assert InMemoryBuffer("abc").cursor() == CursorPosition(line=0, character=0)

    def test_move(self) -> None:
        buffer = InMemoryBuffer("abc\ndef")

        buffer.move_cursor(1, 2)

        assert buffer.cursor() == CursorPosition(line=1, character=2)

    def test_move_is_clamped(self) -> None:
        buffer = InMemoryBuffer("abc\ndef")

        buffer.move_cursor(9, 9)
        assert buffer.cursor() == CursorPosition(line=1, character=3)

        buffer.move_cursor(-1, -1)
        assert buffer.cursor() == CursorPosition(line=0, character=0)


class TestApplyEdit:
    def test_replaces_span(self) -> None:
        buffer = InMemoryBuffer('"DATA","BH1","2.50"')

        applied = buffer.apply_edit(TextEdit(0, 14, 18, "9.99"))

        assert applied
        assert buffer.text() == '"DATA","BH1","9.99"'
        assert buffer.version == 1

    def test_insert_at_empty_span(self) -> None:
        buffer = InMemoryBuffer('"UNIT","",""')

        buffer.apply_edit(TextEdit(0, 8, 8, "m"))

        assert buffer.line_at(0) == '"UNIT","m",""'

    def test_newline_in_text_splits_line(self) -> None:
        buffer = InMemoryBuffer("ab")

        buffer.apply_edit(TextEdit(0, 1, 1, "\n"))

        assert buffer.lines() == ["a", "b"]

    def test_unicode_separator_in_text_keeps_line(self) -> None:
        buffer = InMemoryBuffer('"DATA","x"\n"DATA","y"')

        buffer.apply_edit(TextEdit(0, 8, 9, "a\u2028b"))

        assert buffer.line_count() == 2
        assert buffer.line_at(0) == '"DATA","a\u2028b"'

    def test_rejects_unknown_line(self) -> None:
        buffer = InMemoryBuffer("abc")

        assert not buffer.apply_edit(TextEdit(3, 0, 0, "x"))
        assert buffer.text() == "abc"
        assert buffer.version == 0

    def test_rejects_span_past_end(self) -> None:
        buffer = InMemoryBuffer("abc")

        assert not buffer.apply_edit(TextEdit(0, 2, 9, "x"))
        assert not buffer.apply_edit(TextEdit(0, 2, 1, "x"))
        assert buffer.text() == "abc"
