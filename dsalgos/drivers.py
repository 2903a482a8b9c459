"""Driver records entered as whitespace-separated fields."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DriverRecord:
    """A driver's name, licence number, route and distance in kilometres."""

    name: str
    licence: str
    route: str
    kms: int


def parse_driver(text: str) -> DriverRecord:
    """Read name, licence, route and kilometres from whitespace-separated text."""
    fields = text.split()
    if len(fields) != 4:
        raise ValueError(f"expected 4 fields, got {len(fields)}")
    name, licence, route, kms = fields
    try:
        distance = int(kms)
    except ValueError:
        raise ValueError(f"kilometres must be an integer, got {kms!r}") from None
    return DriverRecord(name, licence, route, distance)


def format_driver(record: DriverRecord) -> str:
    """Render a record as its four fields separated by single spaces."""
    return f"{record.name} {record.licence} {record.route} {record.kms}"