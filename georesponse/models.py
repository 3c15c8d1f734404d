from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import ContentEncodingError
    from .records import Record

STATUS_HTTP_OK = 200


class ResponseHeader:
    """
    Parsed status line and header fields of a lookup response.

    Field order is preserved in ``raw_headers``; lookups by name are
    case-insensitive and the last occurrence of a duplicated name wins.
    """

    def __init__(
        self,
        status_code: int = 0,
        reason: str = "",
        http_version: str = "",
        headers: Iterable[tuple[str, str]] = (),
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.http_version = http_version
        self.raw_headers: tuple[tuple[str, str], ...] = tuple(headers)

    @property
    def headers(self) -> dict[str, str]:
        out: dict[str, str] = {}
        for name, value in self.raw_headers:
            out[name.lower()] = value
        return out

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.headers.get(name.lower(), default)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self.headers

    @property
    def is_valid(self) -> bool:
        return self.status_code > 0

    def with_status(self, status_code: int, reason: str) -> ResponseHeader:
        """Return a copy carrying a different status line."""
        return ResponseHeader(status_code, reason, self.http_version, self.raw_headers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResponseHeader):
            return NotImplemented
        return (
            self.status_code == other.status_code
            and self.reason == other.reason
            and self.http_version == other.http_version
            and self.raw_headers == other.raw_headers
        )

    def __hash__(self) -> int:
        return hash((self.status_code, self.reason, self.http_version, self.raw_headers))

    def __repr__(self) -> str:
        return f"<ResponseHeader [{self.status_code}] {self.reason!r}>"


class ParseResult:
    """
    Terminal outcome of parsing one lookup response.

    Exactly one of the subclasses is returned by the parser. All of them
    answer ``status_code``, ``reason``, ``header()`` and ``records`` so a
    caller can treat the result uniformly and only look at the variant
    when it needs the structured error.
    """

    ok = False

    def __init__(self, header: ResponseHeader) -> None:
        self.header_block = header

    @property
    def status_code(self) -> int:
        return self.header_block.status_code

    @property
    def reason(self) -> str:
        return self.header_block.reason

    @property
    def records(self) -> tuple[Record, ...]:
        return ()

    def header(self, name: str, default: str | None = None) -> str | None:
        return self.header_block.get(name, default)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseResult):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.header_block == other.header_block
            and self.records == other.records
        )

    def __hash__(self) -> int:
        return hash((type(self), self.header_block, self.records))

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} [{self.status_code}] "
            f"{len(self.records)} records>"
        )


class Success(ParseResult):
    """The body was decoded and parsed into records."""

    ok = True

    def __init__(
        self, header: ResponseHeader, records: Iterable[Record], body: bytes = b""
    ) -> None:
        super().__init__(header)
        self._records = tuple(records)
        self.body = body

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records


class EncodingFailure(ParseResult):
    """
    The body could not be decoded.

    ``header_block`` carries the synthetic content-encoding status so
    callers checking only the status line see the failure; the header the
    server actually sent is kept in ``received_header``.
    """

    def __init__(self, header: ResponseHeader, error: ContentEncodingError) -> None:
        super().__init__(header.with_status(error.status_code, str(error)))
        self.received_header = header
        self.error = error


class NoBody(ParseResult):
    """No header block was found, or the status was not a success."""
