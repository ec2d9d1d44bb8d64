from unittest.mock import MagicMock

from ags_kit.observability import names
from ags_kit.parsers import AgsParser, ParsedDocument, parse_lines


class TestAgsParser:
    def test_groups_in_file_order(self, parsed: ParsedDocument) -> None:
        """Group mapping keeps the order groups appear in the file."""
        assert list(parsed.groups) == ["PROJ", "TRAN", "LOCA", "GEOL"]

    def test_group_metadata(self, parsed: ParsedDocument) -> None:
        loca = parsed.groups["LOCA"]

        assert loca.start_line == 12
        assert loca.heading_line == 13
        assert loca.headings == [
            "LOCA_ID",
            "LOCA_TYPE",
            "LOCA_NATE",
            "LOCA_NATN",
            "LOCA_FDEP",
        ]
        assert loca.units == ["", "", "m", "m", "m"]
        assert loca.types == ["ID", "PA", "2DP", "2DP", "2DP"]

    def test_data_rows_exclude_row_type(self, parsed: ParsedDocument) -> None:
        geol = parsed.groups["GEOL"]

        assert geol.record_count == 4
        assert geol.data_rows[0] == ["BH1", "0.00", "1.50", "Topsoil"]
        assert geol.data_lines == [24, 25, 26, 27]

    def test_row_lines_are_recorded(self, parsed: ParsedDocument) -> None:
        proj = parsed.groups["PROJ"]

        assert (proj.unit_line, proj.type_line) == (2, 3)

    def test_format_version_from_transmission_group(self, parsed: ParsedDocument) -> None:
        assert parsed.version == "4.1.1"

    def test_record_count_matches_rows(self, parsed: ParsedDocument) -> None:
        for group in parsed.groups.values():
            assert group.record_count == len(group.data_rows)

    def test_rows_follow_their_declaration(self, parsed: ParsedDocument) -> None:
        """Declaration precedes headings and data, and the next group."""
        groups = list(parsed.groups.values())
        for group, following in zip(groups, groups[1:] + [None]):
            assert group.start_line < group.heading_line
            assert group.start_line < group.data_lines[0]
            if following is not None:
                assert group.data_lines[-1] < following.start_line

    def test_reparse_is_idempotent(self, sample_lines: list[str]) -> None:
        """Parsing unchanged text twice yields equal documents."""
        parser = AgsParser()

        assert parser.parse(sample_lines) == parser.parse(sample_lines)


class TestAgsParserPermissiveness:
    def test_rows_outside_any_group_are_dropped(self) -> None:
        parsed = parse_lines(['"HEADING","A"', '"DATA","1"', '"GROUP","G1"'])

        assert list(parsed.groups) == ["G1"]
        assert parsed.groups["G1"].headings == []
        assert parsed.groups["G1"].record_count == 0

    def test_unknown_and_blank_lines_are_skipped(self) -> None:
        parsed = parse_lines(
            ['"GROUP","G1"', "   ", "garbage", '"NOTE","x"', '"DATA","1"']
        )

        assert parsed.groups["G1"].data_rows == [["1"]]
        assert parsed.groups["G1"].data_lines == [4]

    def test_keywords_are_case_insensitive(self) -> None:
        parsed = parse_lines(['"group","G1"', '"heading","A"', '"data","1"'])

        assert parsed.groups["G1"].headings == ["A"]
        assert parsed.groups["G1"].record_count == 1

    def test_invalid_group_name_keeps_current_group(self) -> None:
        """A declaration with a bad identifier is ignored like any other line."""
        parsed = parse_lines(['"GROUP","G1"', '"GROUP","BAD-NAME"', '"DATA","1"'])

        assert list(parsed.groups) == ["G1"]
        assert parsed.groups["G1"].record_count == 1

    def test_duplicate_group_name_last_write_wins(self) -> None:
        parsed = parse_lines(
            [
                '"GROUP","G1"',
                '"DATA","old"',
                '"GROUP","G2"',
                '"GROUP","G1"',
                '"DATA","new"',
            ]
        )

        assert list(parsed.groups) == ["G1", "G2"]
        assert parsed.groups["G1"].start_line == 3
        assert parsed.groups["G1"].data_rows == [["new"]]

    def test_rows_may_be_ragged(self) -> None:
        parsed = parse_lines(
            ['"GROUP","G1"', '"HEADING","A","B"', '"DATA","1"', '"DATA","1","2","3"']
        )

        assert parsed.groups["G1"].data_rows == [["1"], ["1", "2", "3"]]

    def test_empty_input(self) -> None:
        parsed = parse_lines([])

        assert parsed.groups == {}
        assert parsed.version is None
        assert parsed.first_group() is None


class TestFormatVersion:
    def test_last_non_empty_version_wins(self) -> None:
        parsed = parse_lines(
            [
                '"GROUP","TRAN"',
                '"HEADING","TRAN_ISNO","TRAN_AGS"',
                '"DATA","1","4.0.4"',
                '"DATA","2","4.1"',
                '"DATA","3",""',
            ]
        )

        assert parsed.version == "4.1"

    def test_version_needs_the_heading(self) -> None:
        parsed = parse_lines(['"GROUP","TRAN"', '"HEADING","TRAN_ISNO"', '"DATA","1"'])

        assert parsed.version is None

    def test_other_groups_do_not_set_version(self) -> None:
        parsed = parse_lines(['"GROUP","PROJ"', '"HEADING","TRAN_AGS"', '"DATA","4.1"'])

        assert parsed.version is None


class TestParserMetrics:
    def test_records_duration_and_counts(self, sample_lines: list[str]) -> None:
        hook = MagicMock()

        AgsParser(metrics_hook=hook).parse(sample_lines)

        hook.record_latency.assert_called_once()
        assert hook.record_latency.call_args.args[0] == names.PARSE_DURATION
        hook.increment.assert_called_once_with(names.PARSE_LINES_TOTAL, len(sample_lines))
        hook.record_gauge.assert_called_once_with(names.PARSE_GROUPS, 4)
