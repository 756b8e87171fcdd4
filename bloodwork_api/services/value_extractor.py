"""Locate lab-test readings in the text of a bloodwork report.

Every line is scanned two ways. The catalog path looks for a known test's
display name and takes the first ``number unit`` pair on the line. The
pattern path runs two generic ``name: number unit`` / ``number unit name``
expressions and maps the captured name onto the catalog.

Readings are merged in document order, catalog-path readings of a line ahead
of its pattern-path readings, and the first reading for each canonical key
is kept.
"""
import logging
import re
from collections.abc import Iterator

from bloodwork_api.schemas.screening import ExtractedValue
from bloodwork_api.services.reference_ranges import REFERENCE_RANGES, ReferenceRange

logger = logging.getLogger(__name__)

_UNIT = r"[a-zA-Zμµ/%]+"
_NAME = r"[A-Za-z\s]+(?:\([^)]+\))?"

VALUE_UNIT_RE = re.compile(rf"(\d+\.?\d*)\s*({_UNIT})")
NAME_VALUE_UNIT_RE = re.compile(
    rf"(?:^|\s)(?P<name>{_NAME})\s*:?\s*(?P<value>\d+\.?\d*)\s*(?P<unit>{_UNIT})",
    re.IGNORECASE,
)
VALUE_UNIT_NAME_RE = re.compile(
    rf"(?P<value>\d+\.?\d*)\s*(?P<unit>{_UNIT})\s+(?P<name>{_NAME})",
    re.IGNORECASE,
)

_NAME_PATTERNS = {
    key: re.compile(re.escape(item.name), re.IGNORECASE) for key, item in REFERENCE_RANGES.items()
}


def match_reference(test_name: str) -> ReferenceRange | None:
    """Map a loosely written test name onto the catalog, in catalog order."""
    lowered = test_name.strip().lower()
    if not lowered:
        return None
    for item in REFERENCE_RANGES.values():
        display = item.name.lower()
        if lowered in display or display.split(" ")[0] in lowered:
            return item
    return None


def _catalog_readings(line: str) -> Iterator[ExtractedValue]:
    for key, pattern in _NAME_PATTERNS.items():
        if not pattern.search(line):
            continue
        match = VALUE_UNIT_RE.search(line)
        if match:
            item = REFERENCE_RANGES[key]
            yield ExtractedValue(key=key, name=item.name, value=float(match.group(1)), unit=match.group(2))


def _pattern_readings(line: str) -> Iterator[ExtractedValue]:
    for pattern in (NAME_VALUE_UNIT_RE, VALUE_UNIT_NAME_RE):
        for match in pattern.finditer(line):
            item = match_reference(match.group("name"))
            if item is None:
                continue
            yield ExtractedValue(
                key=item.key,
                name=item.name,
                value=float(match.group("value")),
                unit=match.group("unit"),
                source="pattern",
            )


def extract_values(text: str) -> list[ExtractedValue]:
    readings: dict[str, ExtractedValue] = {}
    for line in text.splitlines():
        for reading in (*_catalog_readings(line), *_pattern_readings(line)):
            if reading.key in readings:
                if readings[reading.key].value != reading.value:
                    logger.debug(
                        "Discarding %s reading %s %s; keeping first reading %s %s",
                        reading.name,
                        reading.value,
                        reading.unit,
                        readings[reading.key].value,
                        readings[reading.key].unit,
                    )
                continue
            readings[reading.key] = reading
    return list(readings.values())
