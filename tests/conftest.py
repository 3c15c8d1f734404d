"""Pytest configuration and fixtures."""

import gzip
import zlib

import pytest

SAMPLE_LINES = [
    "8.8.8.8,Mountain View,CA,US,37.386,-122.0838",
    "1.1.1.1,Brisbane,QLD,AU,-27.4679,153.0281",
    "2001:db8::1,Berlin,BE,DE,52.5167,13.4",
]


def build_response(
    body: bytes = b"",
    status: str = "200 OK",
    headers: list[tuple[str, str]] | None = None,
) -> bytes:
    lines = [f"HTTP/1.1 {status}"]
    for name, value in headers or []:
        lines.append(f"{name}: {value}")
    return ("\r\n".join(lines) + "\r\n\r\n").encode("latin-1") + body


@pytest.fixture
def make_response():
    """Factory for raw response bytes."""
    return build_response


@pytest.fixture
def sample_body():
    """Uncompressed body with three well-formed lines."""
    return "\n".join(SAMPLE_LINES).encode("utf-8")


@pytest.fixture
def gzip_body(sample_body):
    """Sample body compressed with gzip."""
    return gzip.compress(sample_body)


@pytest.fixture
def zlib_body(sample_body):
    """Sample body compressed with zlib-wrapped deflate."""
    return zlib.compress(sample_body)
