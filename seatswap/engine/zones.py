"""
Zone inference - map a section code to its coarse seating zone.
"""
import re
from dataclasses import dataclass
from typing import Callable, Optional, Union


UNKNOWN_ZONE = "Unknown"

_LEADING_INT = re.compile(r"^[+-]?\d+")


@dataclass(frozen=True)
class ZoneRule:
    """A section pattern (regex or predicate) and the zone it maps to."""
    pattern: Union[re.Pattern, Callable[[str], bool]]
    zone: str

    def matches(self, section: str) -> bool:
        if isinstance(self.pattern, re.Pattern):
            return self.pattern.search(section) is not None
        return self.pattern(section)


def _leading_number(section: str) -> Optional[int]:
    match = _LEADING_INT.match(section)
    return int(match.group()) if match else None


def _number_between(low: int, high: int) -> Callable[[str], bool]:
    def predicate(section: str) -> bool:
        number = _leading_number(section)
        return number is not None and low <= number < high
    return predicate


# Checked in order; the first rule that matches wins.
DEFAULT_ZONE_RULES = (
    ZoneRule(re.compile(r"^1[0-2][0-9]$"), "Lower Bowl"),
    ZoneRule(re.compile(r"^2[0-2][0-9]$"), "Upper Bowl"),
    ZoneRule(re.compile(r"^C\d+$", re.IGNORECASE), "Club Level"),
    ZoneRule(re.compile(r"^S\d+$", re.IGNORECASE), "Suite"),
    ZoneRule(re.compile(r"^(FL|F)\d+$", re.IGNORECASE), "Floor"),
    # Suffixed codes like "105A"
    ZoneRule(_number_between(100, 130), "Lower Bowl"),
    ZoneRule(_number_between(200, 240), "Upper Bowl"),
)


def infer_zone_from_section(section: Optional[str]) -> str:
    """
    Infer the zone from a section number or code ("101", "C12", "FL3").

    Returns "Unknown" when no rule applies.
    """
    if not section or not isinstance(section, str):
        return UNKNOWN_ZONE

    section = section.strip()
    for rule in DEFAULT_ZONE_RULES:
        if rule.matches(section):
            return rule.zone

    return UNKNOWN_ZONE


def has_known_zone(section: Optional[str]) -> bool:
    return infer_zone_from_section(section) != UNKNOWN_ZONE
