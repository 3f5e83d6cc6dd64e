"""Tests for order_processor.records and order_processor.detector"""
from order_processor.detector import MANAPOOL, TCGPLAYER, detect_format
from order_processor.records import split_records, tokenize_record

# ── split_records ────────────────────────────────────────────────────


class TestSplitRecords:
    def test_link_lines_start_records(self) -> None:
        lines = ['https://a\tx', 'continued', 'https://b\ty']
        assert split_records(lines) == ['https://a\tx\ncontinued', 'https://b\ty']

    def test_trailing_record_flushed(self) -> None:
        assert split_records(['https://a', 'one', 'two']) == ['https://a\none\ntwo']

    def test_text_before_first_link_forms_its_own_block(self) -> None:
        assert split_records(['orphan', 'https://a']) == ['\norphan', 'https://a']

    def test_no_lines(self) -> None:
        assert split_records([]) == []

    def test_only_http_scheme_does_not_split(self) -> None:
        assert split_records(['https://a', 'http://b']) == ['https://a\nhttp://b']


# ── tokenize_record ──────────────────────────────────────────────────


class TestTokenizeRecord:
    def test_tabs_split_columns(self) -> None:
        assert tokenize_record('a\tb\tc') == ['a', 'b', 'c']

    def test_quoted_tabs_and_newlines_stay_in_column(self) -> None:
        assert tokenize_record('a\t"b\tc\nd"\te') == ['a', 'b\tc\nd', 'e']

    def test_quotes_are_not_emitted(self) -> None:
        assert tokenize_record('"a"\t"b"') == ['a', 'b']

    def test_empty_middle_column_kept(self) -> None:
        assert tokenize_record('a\t\tb') == ['a', '', 'b']

    def test_trailing_empty_column_dropped(self) -> None:
        assert tokenize_record('a\tb\t') == ['a', 'b']

    def test_unbalanced_quote_swallows_rest(self) -> None:
        assert tokenize_record('a\t"b\tc') == ['a', 'b\tc']

    def test_unquoted_newline_kept_in_column(self) -> None:
        assert tokenize_record('a\nb\tc') == ['a\nb', 'c']


# ── detect_format ────────────────────────────────────────────────────


class TestDetectFormat:
    def test_manapool_marker_on_first_data_line(self) -> None:
        lines = ['Order\tDetails', 'https://manapool.com/seller/orders/x\tfoo']
        assert detect_format(lines) is MANAPOOL

    def test_tcgplayer_otherwise(self) -> None:
        lines = ['Order\tDetails', 'https://sellerportal.tcgplayer.com/orders/x\tfoo']
        assert detect_format(lines) is TCGPLAYER

    def test_header_only_defaults_to_tcgplayer(self) -> None:
        assert detect_format(['Order\tDetails']) is TCGPLAYER

    def test_marker_in_header_only_is_ignored(self) -> None:
        lines = ['manapool.com export', 'https://sellerportal.tcgplayer.com/orders/x']
        assert detect_format(lines) is TCGPLAYER

    def test_marker_on_later_line_is_ignored(self) -> None:
        lines = ['h', 'https://sellerportal.tcgplayer.com/orders/x', 'https://manapool.com/x']
        assert detect_format(lines) is TCGPLAYER
