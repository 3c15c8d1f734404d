from __future__ import annotations

import ipaddress
from collections.abc import Iterable

from .compression import ACCEPT_ENCODING
from .headers import merge_headers

DEFAULT_PATH = "/cgi-bin/geoip"
DEFAULT_USER_AGENT = "georesponse"


def build_request(
    ips: Iterable[str],
    host: str,
    path: str = DEFAULT_PATH,
    headers: dict[str, str] | None = None,
) -> bytes:
    """
    Build the HTTP request bytes for a lookup of ``ips``.

    The addresses are sent as one comma-separated ``ip=`` form field. The
    request advertises only encodings the response parser can decode.
    Sending it is up to the caller.

    Raises:
        ValueError: if ``ips`` is empty or holds an invalid address.
    """
    addresses = [str(ipaddress.ip_address(ip.strip())) for ip in ips]
    if not addresses:
        raise ValueError("At least one IP address is required")
    body = ("ip=" + ",".join(addresses)).encode("ascii")

    defaults = [
        ("Host", host),
        ("User-Agent", DEFAULT_USER_AGENT),
        ("Accept-Encoding", ACCEPT_ENCODING),
        ("Content-Type", "application/x-www-form-urlencoded"),
    ]
    merged = merge_headers(defaults, headers)
    merged = [(n, v) for n, v in merged if n.lower() != "content-length"]
    merged.append(("Content-Length", str(len(body))))

    lines = [f"POST {path} HTTP/1.1\r\n".encode("ascii")]
    for name, value in merged:
        lines.append(f"{name}: {value}\r\n".encode("latin-1"))
    lines.append(b"\r\n")
    return b"".join(lines) + body
