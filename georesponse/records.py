"""
Line-oriented record parsing for lookup response bodies.

Each body line becomes at most one record. Lines that do not parse yield
an empty record and are filtered out, so one corrupt line never costs the
rest of the batch.
"""

from __future__ import annotations

import ipaddress
import math
from collections.abc import Callable, Iterable, Iterator
from typing import Protocol


class Record(Protocol):
    def is_empty(self) -> bool: ...


RecordFactory = Callable[[str], Record]


def _to_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


class GeoIpRecord:
    """
    Location of one IP address as reported by the lookup service.

    The service answers one line per address, either
    ``ip,city,region,country,latitude,longitude`` or ``ip,unknown`` when it
    has no location for the address.
    """

    def __init__(
        self,
        ip: ipaddress.IPv4Address | ipaddress.IPv6Address | None = None,
        latitude: float = 0.0,
        longitude: float = 0.0,
        city: str = "",
        region: str = "",
        country: str = "",
        unknown: bool = False,
    ) -> None:
        self.ip = ip
        self.latitude = latitude
        self.longitude = longitude
        self.city = city
        self.region = region
        self.country = country
        self._unknown = unknown

    @classmethod
    def from_string(cls, line: str) -> GeoIpRecord:
        """Parse one body line; returns an empty record if it is malformed."""
        fields = [f.strip() for f in line.split(",")]
        if len(fields) < 2:
            return cls()
        try:
            ip = ipaddress.ip_address(fields[0])
        except ValueError:
            return cls()
        if len(fields) == 2 and fields[1].lower() == "unknown":
            return cls(ip, unknown=True)
        if len(fields) < 6:
            return cls()
        return cls(
            ip,
            latitude=_to_float(fields[4]),
            longitude=_to_float(fields[5]),
            city=fields[1],
            region=fields[2],
            country=fields[3],
        )

    def is_empty(self) -> bool:
        return self.ip is None

    def is_unknown(self) -> bool:
        return self._unknown

    def _key(self) -> tuple:
        return (
            self.ip,
            self.latitude,
            self.longitude,
            self.city,
            self.region,
            self.country,
            self._unknown,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoIpRecord):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        if self.is_empty():
            return ""
        if self._unknown:
            return f"{self.ip},unknown"
        return (
            f"{self.ip},{self.city},{self.region},{self.country},"
            f"{self.latitude},{self.longitude}"
        )

    def __repr__(self) -> str:
        if self.is_empty():
            return "<GeoIpRecord empty>"
        return f"<GeoIpRecord {self}>"


def iter_lines(text: str) -> Iterator[str]:
    """Yield body lines split on LF, with CR remnants and padding removed."""
    for line in text.split("\n"):
        yield line.strip()


def parse_records(
    lines: Iterable[str],
    factory: RecordFactory = GeoIpRecord.from_string,
) -> Iterator[Record]:
    """Yield a record for each line that parses, in line order."""
    records = (factory(line) for line in lines if line)
    return (record for record in records if not record.is_empty())


def parse_body(
    body: bytes,
    factory: RecordFactory = GeoIpRecord.from_string,
    encoding: str = "utf-8",
) -> tuple[Record, ...]:
    """Decode body text and collect its valid records."""
    text = body.decode(encoding, errors="replace")
    return tuple(parse_records(iter_lines(text), factory))
