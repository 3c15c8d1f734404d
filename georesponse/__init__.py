from georesponse.response import ResponseParser, parse_response
from georesponse.models import (
    STATUS_HTTP_OK,
    ResponseHeader,
    ParseResult,
    Success,
    EncodingFailure,
    NoBody,
)
from georesponse.records import GeoIpRecord
from georesponse.compression import EncodingStrategy
from georesponse.request import build_request
from georesponse.errors import (
    STATUS_CONTENT_ENCODING_ERR,
    GeoResponseError,
    FramingError,
    ContentEncodingError,
    UnsupportedEncodingError,
    DecodeError,
)

__all__ = [
    "ResponseParser",
    "parse_response",
    "STATUS_HTTP_OK",
    "STATUS_CONTENT_ENCODING_ERR",
    "ResponseHeader",
    "ParseResult",
    "Success",
    "EncodingFailure",
    "NoBody",
    "GeoIpRecord",
    "EncodingStrategy",
    "build_request",
    "GeoResponseError",
    "FramingError",
    "ContentEncodingError",
    "UnsupportedEncodingError",
    "DecodeError",
]
