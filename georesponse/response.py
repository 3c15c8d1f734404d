from __future__ import annotations

import logging

from .compression import DEFAULT_MAX_DECOMPRESSED_SIZE, decode_payload, resolve_encoding
from .errors import ContentEncodingError, FramingError
from .headers import parse_header_block, split_response
from .models import (
    STATUS_HTTP_OK,
    EncodingFailure,
    NoBody,
    ParseResult,
    ResponseHeader,
    Success,
)
from .records import GeoIpRecord, RecordFactory, parse_body

logger = logging.getLogger(__name__)


class ResponseParser:
    """
    Turns raw lookup-service response bytes into a :class:`ParseResult`.

    ``parse`` never raises for malformed input: framing problems come back
    as :class:`NoBody`, decoding problems as :class:`EncodingFailure` with
    the synthetic content-encoding status, and unparseable body lines are
    dropped.

    Args:
        max_decompressed_size: Largest decoded body accepted, or None for no limit
        record_factory: Builds one record from a body line
        encoding: Text codec used on the decoded body
    """

    def __init__(
        self,
        max_decompressed_size: int | None = DEFAULT_MAX_DECOMPRESSED_SIZE,
        record_factory: RecordFactory = GeoIpRecord.from_string,
        encoding: str = "utf-8",
    ) -> None:
        if max_decompressed_size is not None and max_decompressed_size < 0:
            raise ValueError("max_decompressed_size must be non-negative or None")
        self.max_decompressed_size = max_decompressed_size
        self.record_factory = record_factory
        self.encoding = encoding

    def parse(self, raw: bytes) -> ParseResult:
        raw = bytes(raw)
        try:
            header_block, body = split_response(raw)
            header = parse_header_block(header_block)
        except FramingError as exc:
            logger.debug("Unusable response (%d bytes): %s", len(raw), exc)
            return NoBody(ResponseHeader())

        if header.status_code != STATUS_HTTP_OK:
            logger.debug("Lookup returned status %d %s", header.status_code, header.reason)
            return NoBody(header)

        content_encoding = header.get("Content-Encoding")
        try:
            strategy = resolve_encoding(content_encoding)
            if content_encoding is not None:
                body = decode_payload(
                    body,
                    strategy,
                    content_encoding,
                    max_size=self.max_decompressed_size,
                )
        except ContentEncodingError as exc:
            logger.warning("%s", exc)
            return EncodingFailure(header, exc)

        records = parse_body(body, self.record_factory, self.encoding)
        logger.debug("Parsed %d records from %d body bytes", len(records), len(body))
        return Success(header, records, body)


def parse_response(raw: bytes, **kwargs) -> ParseResult:
    """Parse one response with a :class:`ResponseParser` built from ``kwargs``."""
    return ResponseParser(**kwargs).parse(raw)
