#!/usr/bin/env python3
"""
Lookup response example for georesponse.

Builds a lookup request and parses a canned gzip-compressed answer the way
a transport would hand it over.
"""

import gzip
import logging

from georesponse import build_request, parse_response


def main():
    logging.basicConfig(level=logging.DEBUG)

    request = build_request(["8.8.8.8", "10.0.0.1"], "geoip.example.org")
    print(request.decode("latin-1"))
    print("-" * 50)

    body = gzip.compress(
        b"8.8.8.8,Mountain View,CA,US,37.386,-122.0838\n"
        b"10.0.0.1,unknown\n"
        b"corrupted line\n"
    )
    raw = (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Encoding: gzip\r\n"
        b"Content-Type: text/plain\r\n"
        b"\r\n" + body
    )

    result = parse_response(raw)
    print(f"Status: {result.status_code} {result.reason}")
    for record in result.records:
        print(f"   {record!r}")


if __name__ == "__main__":
    main()
