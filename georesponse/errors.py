STATUS_CONTENT_ENCODING_ERR = 601


class GeoResponseError(Exception):
    """Base error for georesponse."""


class FramingError(GeoResponseError):
    """Raised when a response has no usable header block."""


class ContentEncodingError(GeoResponseError):
    """Raised when the response body cannot be decoded."""

    status_code = STATUS_CONTENT_ENCODING_ERR

    def __init__(self, message: str, encoding: str) -> None:
        super().__init__(message)
        self.encoding = encoding


class UnsupportedEncodingError(ContentEncodingError):
    """Raised for a Content-Encoding token with no known decoder."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"Unknown content encoding '{encoding}'", encoding)


class DecodeError(ContentEncodingError):
    """Raised when decompression fails or produces no output."""

    def __init__(self, encoding: str, detail: str) -> None:
        super().__init__(
            f"Content decoding using method '{encoding}' failed: {detail}", encoding
        )
        self.detail = detail
