"""Best-effort extraction of locality fields from a display label.

Providers such as LocationIQ only return one comma-separated label
(``"123 Main St, Springfield, Clarke County, GA, USA"``). These helpers pull
city, county and state out of it. An empty string means "unknown".
"""

import re

SEGMENT_SEPARATOR = ", "

_LEADING_DIGIT = re.compile(r"^\d")
_COUNTY = re.compile(r"([^,]+)\s+County")
_STATE_CODE = re.compile(r"^[A-Z]{2}$")


def _segments(display_name: str) -> list[str]:
    return display_name.split(SEGMENT_SEPARATOR) if display_name else []


def extract_city(display_name: str) -> str:
    """Return the first plausible city among the first three segments."""
    for part in _segments(display_name)[:3]:
        if _LEADING_DIGIT.match(part) or "County" in part or len(part) <= 2:
            continue
        return part
    return ""


def extract_county(display_name: str) -> str:
    """Return the name preceding the first ``County`` in the label."""
    match = _COUNTY.search(display_name or "")
    return match.group(1).strip() if match else ""


def extract_state(display_name: str) -> str:
    """Return the last two-letter uppercase segment (a US state code)."""
    for part in reversed(_segments(display_name)):
        if _STATE_CODE.match(part):
            return part
    return ""


def extract_components(display_name: str) -> tuple[str, str, str]:
    """Return ``(city, county, state)`` extracted from a display label."""
    return (
        extract_city(display_name),
        extract_county(display_name),
        extract_state(display_name),
    )
