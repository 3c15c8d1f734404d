"""Tests for georesponse.headers module."""

import pytest
from georesponse.errors import FramingError
from georesponse.headers import (
    merge_headers,
    _sanitize_header,
    split_response,
    parse_status_line,
    parse_header_block,
)


class TestSplitResponse:
    """Tests for split_response function."""

    def test_split_at_first_separator(self):
        """Test header and body are split at the first blank line."""
        header, body = split_response(b"HTTP/1.1 200 OK\r\n\r\nline1\r\n\r\nline2")
        assert header == b"HTTP/1.1 200 OK"
        assert body == b"line1\r\n\r\nline2"

    def test_empty_body(self):
        """Test separator at the end gives an empty body."""
        header, body = split_response(b"HTTP/1.1 200 OK\r\n\r\n")
        assert header == b"HTTP/1.1 200 OK"
        assert body == b""

    def test_missing_separator_raises(self):
        """Test buffer without separator raises FramingError."""
        with pytest.raises(FramingError):
            split_response(b"HTTP/1.1 200 OK\r\nServer: x\r\n")

    def test_bare_lf_is_not_a_separator(self):
        """Test LF-only blank line is not accepted."""
        with pytest.raises(FramingError):
            split_response(b"HTTP/1.1 200 OK\n\nbody")

    def test_empty_header_block_raises(self):
        """Test separator at position zero raises FramingError."""
        with pytest.raises(FramingError):
            split_response(b"\r\n\r\nbody")

    def test_empty_buffer_raises(self):
        """Test empty buffer raises FramingError."""
        with pytest.raises(FramingError):
            split_response(b"")


class TestParseStatusLine:
    """Tests for parse_status_line function."""

    def test_basic(self):
        """Test protocol, code and message are split."""
        assert parse_status_line("HTTP/1.1 200 OK") == ("1.1", 200, "OK")

    def test_multi_word_reason(self):
        """Test reason keeps its spaces."""
        assert parse_status_line("HTTP/1.0 404 Not Found") == ("1.0", 404, "Not Found")

    def test_missing_reason(self):
        """Test reason may be absent."""
        assert parse_status_line("HTTP/1.1 204") == ("1.1", 204, "")

    def test_non_numeric_code_raises(self):
        """Test non-integer status code raises FramingError."""
        with pytest.raises(FramingError, match="Malformed status line"):
            parse_status_line("HTTP/1.1 OK fine")

    @pytest.mark.parametrize("code", ["2_00", "+200", "\u0662\u0660\u0660", "-1"])
    def test_non_ascii_digit_code_raises(self, code):
        """Test codes that are not plain ASCII digits raise FramingError."""
        with pytest.raises(FramingError, match="Malformed status line"):
            parse_status_line(f"HTTP/1.1 {code} OK")

    def test_missing_code_raises(self):
        """Test status line with one token raises FramingError."""
        with pytest.raises(FramingError):
            parse_status_line("garbage")


class TestParseHeaderBlock:
    """Tests for parse_header_block function."""

    def test_fields_parsed(self):
        """Test name/value lines populate the header."""
        header = parse_header_block(
            b"HTTP/1.1 200 OK\r\nContent-Encoding: gzip\r\nServer:  geo \r\n"
        )
        assert header.status_code == 200
        assert header.reason == "OK"
        assert header.http_version == "1.1"
        assert header.raw_headers == (("Content-Encoding", "gzip"), ("Server", "geo"))

    def test_lines_without_colon_ignored(self):
        """Test malformed header lines are skipped."""
        header = parse_header_block(
            b"HTTP/1.1 200 OK\r\nnot a header\r\nX-Ok: yes"
        )
        assert header.raw_headers == (("X-Ok", "yes"),)

    def test_value_may_contain_colon(self):
        """Test only the first colon separates name and value."""
        header = parse_header_block(b"HTTP/1.1 200 OK\r\nLocation: http://geo:80/")
        assert header.get("location") == "http://geo:80/"

    def test_lookup_case_insensitive(self):
        """Test parsed fields are looked up case-insensitively."""
        header = parse_header_block(b"HTTP/1.1 200 OK\r\ncontent-encoding: deflate")
        assert header.get("Content-Encoding") == "deflate"

    def test_bad_status_line_raises(self):
        """Test malformed status line raises FramingError."""
        with pytest.raises(FramingError):
            parse_header_block(b"hello world\r\nX: y")


class TestMergeHeaders:
    """Tests for merge_headers function."""

    def test_user_overrides_default_in_place(self):
        """Test user header replaces default keeping position."""
        merged = merge_headers(
            [("Host", "a"), ("User-Agent", "ua")], {"user-agent": "mine", "X-Test": "1"}
        )
        assert merged == [("Host", "a"), ("user-agent", "mine"), ("X-Test", "1")]

    def test_no_user_headers(self):
        """Test None user headers returns defaults."""
        assert merge_headers([("Host", "a")], None) == [("Host", "a")]

    def test_injection_stripped(self):
        """Test CRLF is stripped from merged headers."""
        merged = merge_headers([], {"X-Evil": "a\r\nInjected: b"})
        assert merged == [("X-Evil", "aInjected: b")]

    def test_sanitize_header_strips_null(self):
        """Test null bytes are removed."""
        assert _sanitize_header("X\x00A", "v\x00") == ("XA", "v")
