from __future__ import annotations

from collections.abc import Iterable

from .errors import FramingError
from .models import ResponseHeader

HEADER_SEPARATOR = b"\r\n\r\n"


def _sanitize_header(name: str, value: str) -> tuple[str, str]:
    """
    Strip CR, LF, and null bytes from a header name and value so they cannot
    break the framing of an outgoing request.
    """
    clean_name = name.replace("\r", "").replace("\n", "").replace("\x00", "")
    clean_value = value.replace("\r", "").replace("\n", "").replace("\x00", "")
    return clean_name, clean_value


def merge_headers(
    default_headers: Iterable[tuple[str, str]],
    user_headers: dict[str, str] | None,
) -> list[tuple[str, str]]:
    """
    Merge user headers over defaults. Names compare case-insensitively; a user
    header replaces the default in place, new names are appended in insertion
    order.
    """
    merged: dict[str, tuple[str, str]] = {}
    for name, value in default_headers:
        name, value = _sanitize_header(name, value)
        merged[name.lower()] = (name, value)
    if user_headers:
        for name, value in user_headers.items():
            name, value = _sanitize_header(name, value)
            merged[name.lower()] = (name, value)
    return list(merged.values())


def split_response(raw: bytes) -> tuple[bytes, bytes]:
    """
    Split a raw response at the first blank line.

    Returns:
        ``(header_block, body)``; the separator itself belongs to neither.

    Raises:
        FramingError: if there is no separator or the header block is empty.
    """
    pos = raw.find(HEADER_SEPARATOR)
    if pos < 0:
        raise FramingError("No header/body separator in response")
    if pos == 0:
        raise FramingError("Empty header block")
    return raw[:pos], raw[pos + len(HEADER_SEPARATOR):]


def parse_status_line(line: str) -> tuple[str, int, str]:
    # e.g., HTTP/1.1 200 OK
    parts = line.strip().split(None, 2)
    if len(parts) < 2:
        raise FramingError(f"Malformed status line: {line!r}")
    protocol = parts[0]
    if not (parts[1].isascii() and parts[1].isdigit()):
        raise FramingError(f"Malformed status line: {line!r}")
    status_code = int(parts[1])
    if status_code <= 0:
        raise FramingError(f"Invalid status code in status line: {line!r}")
    version = protocol.split("/", 1)[1] if "/" in protocol else protocol
    reason = parts[2] if len(parts) > 2 else ""
    return version, status_code, reason


def parse_header_block(block: bytes) -> ResponseHeader:
    """
    Parse a header block into a :class:`ResponseHeader`.

    Lines without a colon are skipped. The status line must carry an
    integer status code.

    Raises:
        FramingError: if the status line is malformed.
    """
    lines = block.decode("latin-1").split("\n")
    version, status_code, reason = parse_status_line(lines[0])

    headers: list[tuple[str, str]] = []
    for line in lines[1:]:
        name, sep, value = line.partition(":")
        if not sep or not name.strip():
            continue
        headers.append((name.strip(), value.strip()))
    return ResponseHeader(status_code, reason, version, headers)
