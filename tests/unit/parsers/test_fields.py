from ags_kit.parsers.fields import (
    classify_line,
    extract_quoted_fields,
    match_group_declaration,
)
from ags_kit.parsers.models import RowKind


class TestExtractQuotedFields:
    def test_extracts_fields_in_order(self) -> None:
        """Values between quote pairs come back left to right."""
        assert extract_quoted_fields('"DATA","BH1","2.50"') == ["DATA", "BH1", "2.50"]

    def test_ignores_text_outside_quotes(self) -> None:
        """Commas and whitespace between fields are not part of any value."""
        assert extract_quoted_fields(' "DATA" ,  "A",x"B"') == ["DATA", "A", "B"]

    def test_empty_fields_are_kept(self) -> None:
        assert extract_quoted_fields('"UNIT","","m"') == ["UNIT", "", "m"]

    def test_unterminated_quote_ends_extraction(self) -> None:
        """Nothing past an unclosed quote is returned."""
        assert extract_quoted_fields('"DATA","BH1","2.5') == ["DATA", "BH1"]

    def test_embedded_quote_truncates_field(self) -> None:
        """Doubled quotes are not an escape; the field stops at the first quote."""
        assert extract_quoted_fields('"DATA","6"" pipe"') == ["DATA", "6", " pipe"]

    def test_line_without_quotes_has_no_fields(self) -> None:
        assert extract_quoted_fields("DATA,BH1") == []


class TestClassifyLine:
    def test_each_row_kind_is_recognised(self) -> None:
        assert classify_line('"GROUP","LOCA"') is RowKind.GROUP
        assert classify_line('"HEADING","LOCA_ID"') is RowKind.HEADING
        assert classify_line('"UNIT",""') is RowKind.UNIT
        assert classify_line('"TYPE","ID"') is RowKind.TYPE
        assert classify_line('"DATA","BH1"') is RowKind.DATA

    def test_matching_is_case_insensitive(self) -> None:
        assert classify_line('"data","BH1"') is RowKind.DATA
        assert classify_line('"Heading","LOCA_ID"') is RowKind.HEADING

    def test_leading_whitespace_is_ignored(self) -> None:
        assert classify_line('   "DATA","BH1"') is RowKind.DATA

    def test_unknown_keyword_is_none(self) -> None:
        assert classify_line('"NOTE","hello"') is None
        assert classify_line("") is None

    def test_keyword_must_be_whole_first_field(self) -> None:
        assert classify_line('"DATASET","x"') is None


class TestMatchGroupDeclaration:
    def test_returns_group_name(self) -> None:
        assert match_group_declaration('"GROUP","LOCA"') == "LOCA"

    def test_allows_spaces_around_comma(self) -> None:
        assert match_group_declaration('"GROUP" , "GEOL"') == "GEOL"

    def test_name_keeps_its_case(self) -> None:
        assert match_group_declaration('"group","loca_x1"') == "loca_x1"

    def test_rejects_invalid_identifier(self) -> None:
        assert match_group_declaration('"GROUP","BAD-NAME"') is None
        assert match_group_declaration('"GROUP",""') is None

    def test_non_group_line_is_none(self) -> None:
        assert match_group_declaration('"DATA","LOCA"') is None
