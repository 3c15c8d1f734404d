"""
Content decoding for lookup responses.

Supports gzip and zlib deflate encodings. Unknown encodings are rejected
rather than passed through, so a body is never parsed while still
compressed.
"""

from __future__ import annotations

import enum
import gzip
import io
import zlib

from .errors import DecodeError, UnsupportedEncodingError

# Sent by lookup requests; every value here must resolve below.
ACCEPT_ENCODING = "gzip, deflate"

# Ceiling on decoded body size in bytes. ``None`` disables the check.
DEFAULT_MAX_DECOMPRESSED_SIZE = 16 * 1024 * 1024


class EncodingStrategy(enum.Enum):
    IDENTITY = "identity"
    GZIP = "gzip"
    ZLIB = "zlib"


# Tokens compare case-sensitively, as the lookup service sends them.
ENCODING_STRATEGIES: dict[str, EncodingStrategy] = {
    "gzip": EncodingStrategy.GZIP,
    "x-gzip": EncodingStrategy.GZIP,
    "deflate": EncodingStrategy.ZLIB,
    "x-deflate": EncodingStrategy.ZLIB,
    "text/plain": EncodingStrategy.IDENTITY,
}


def resolve_encoding(content_encoding: str | None) -> EncodingStrategy:
    """
    Map a Content-Encoding header value to a decoding strategy.

    Args:
        content_encoding: Header value, or None when the header is absent

    Returns:
        The matching strategy; IDENTITY when there is no header

    Raises:
        UnsupportedEncodingError: for any token not in ENCODING_STRATEGIES
    """
    if content_encoding is None:
        return EncodingStrategy.IDENTITY
    try:
        return ENCODING_STRATEGIES[content_encoding]
    except KeyError:
        raise UnsupportedEncodingError(content_encoding) from None


def decode_payload(
    body: bytes,
    strategy: EncodingStrategy,
    encoding: str = "",
    max_size: int | None = DEFAULT_MAX_DECOMPRESSED_SIZE,
) -> bytes:
    """
    Decode a response body with the given strategy.

    Args:
        body: Raw body bytes
        strategy: Strategy from resolve_encoding
        encoding: Header token, used in error messages
        max_size: Largest accepted decoded size, or None for no limit

    Returns:
        Decoded body bytes

    Raises:
        DecodeError: if decompression fails, yields nothing, or exceeds max_size
    """
    if strategy is EncodingStrategy.IDENTITY:
        return body

    encoding = encoding or strategy.value
    if strategy is EncodingStrategy.GZIP:
        result = _gunzip(body, encoding, max_size)
    else:
        result = _inflate(body, encoding, max_size)

    if not result:
        raise DecodeError(encoding, "decompressed body is empty")
    if max_size is not None and len(result) > max_size:
        raise DecodeError(
            encoding, f"decompressed body exceeds {max_size} bytes"
        )
    return result


def _gunzip(body: bytes, encoding: str, max_size: int | None) -> bytes:
    # Read one byte past the limit so oversize output is detectable.
    size = -1 if max_size is None else max_size + 1
    try:
        with gzip.GzipFile(fileobj=io.BytesIO(body)) as f:
            return f.read(size)
    except (OSError, EOFError, zlib.error) as exc:
        raise DecodeError(encoding, str(exc) or type(exc).__name__) from exc


def _inflate(body: bytes, encoding: str, max_size: int | None) -> bytes:
    limit = 0 if max_size is None else max_size + 1
    try:
        return _inflate_with(body, zlib.MAX_WBITS, limit)
    except zlib.error as exc:
        first = exc
    # Some servers send raw deflate without the zlib wrapper.
    try:
        return _inflate_with(body, -zlib.MAX_WBITS, limit)
    except zlib.error as exc:
        raise DecodeError(encoding, str(first)) from exc


def _inflate_with(body: bytes, wbits: int, limit: int) -> bytes:
    decompressor = zlib.decompressobj(wbits)
    result = decompressor.decompress(body, limit)
    if not decompressor.eof and (limit == 0 or len(result) < limit):
        raise zlib.error("incomplete or truncated stream")
    return result
