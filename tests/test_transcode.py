"""Tests for record formatting and the line loop."""

import io

from charhex.transcode import (
    format_char_record,
    format_counter,
    format_hex_record,
    iter_lines,
    transcode,
)


def run_text(text: str):
    out = io.StringIO()
    count = transcode(io.StringIO(text), out)
    return count, out.getvalue()


class TestCounter:
    """Counter padding."""

    def test_pads_to_ten_digits(self):
        assert format_counter(42) == "0000000042"

    def test_never_truncates(self):
        assert format_counter(12345678901) == "12345678901"

    def test_exactly_ten_digits(self):
        assert format_counter(9999999999) == "9999999999"


class TestRecords:
    """Character and hex record layout."""

    def test_char_record(self):
        assert format_char_record(1, "abc") == "C0000000001: a      b      c     \n"

    def test_hex_record(self):
        assert format_hex_record(1, "abc") == "X0000000001: 0x0061 0x0062 0x0063\n"

    def test_blank_line_has_no_fields(self):
        assert format_char_record(7, "") == "C0000000007:\n"
        assert format_hex_record(7, "") == "X0000000007:\n"

    def test_hex_is_uppercase(self):
        assert format_hex_record(1, "ÿ") == "X0000000001: 0x00FF\n"

    def test_astral_code_point_widens(self):
        """Code points above U+FFFF are one field with more than 4 digits."""
        assert format_hex_record(1, "\U0001F600") == "X0000000001: 0x1F600\n"
        assert format_char_record(1, "\U0001F600") == "C0000000001: \U0001F600     \n"

    def test_multibyte_character_is_one_field(self):
        assert format_char_record(1, "é你") == "C0000000001: é      你     \n"
        assert format_hex_record(1, "é你") == "X0000000001: 0x00E9 0x4F60\n"

    def test_hex_round_trips_to_code_points(self):
        line = "Az 9~é你\U0001F600\t"
        fields = format_hex_record(1, line).rstrip("\n").split(" ")[1:]
        assert "".join(chr(int(f, 16)) for f in fields) == line


class TestIterLines:
    """Line boundaries."""

    def test_strips_lf_and_crlf(self):
        assert list(iter_lines(io.StringIO("ab\ncd\r\n"))) == ["ab", "cd"]

    def test_strips_every_trailing_cr(self):
        assert list(iter_lines(io.StringIO("a\r\r\n"))) == ["a"]

    def test_inner_cr_is_content(self):
        assert list(iter_lines(io.StringIO("a\rb\n"))) == ["a\rb"]

    def test_unterminated_fragment_dropped(self):
        assert list(iter_lines(io.StringIO("ab\ncd"))) == ["ab"]

    def test_only_fragment(self):
        assert list(iter_lines(io.StringIO("abc"))) == []

    def test_empty_input(self):
        assert list(iter_lines(io.StringIO(""))) == []


class TestTranscode:
    """Full loop over a text stream."""

    def test_two_lines(self):
        count, out = run_text("ab\ncd\n")
        assert count == 2
        assert out == (
            "C0000000001: a      b     \n"
            "X0000000001: 0x0061 0x0062\n"
            "C0000000002: c      d     \n"
            "X0000000002: 0x0063 0x0064\n"
        )

    def test_record_pairs_alternate_and_share_counter(self):
        count, out = run_text("one\n\nthree\nfour\n")
        records = out.splitlines()
        assert count == 4
        assert len(records) == 8
        for i in range(count):
            c, x = records[2 * i], records[2 * i + 1]
            assert c.startswith("C") and x.startswith("X")
            assert c[1:12] == x[1:12] == f"{i + 1:010d}:"

    def test_blank_line_records(self):
        _, out = run_text("\n")
        assert out == "C0000000001:\nX0000000001:\n"

    def test_unterminated_tail_not_emitted(self):
        count, out = run_text("ab\ncd")
        assert count == 1
        assert "C0000000002" not in out

    def test_empty_input_writes_nothing(self):
        assert run_text("") == (0, "")
