"""Labeled regex table for facts pulled out of free page text."""

import re
from dataclasses import dataclass
from typing import Optional

_MONEY = r"\$?(?:[\d.,]+\s*[BMK]\b|\d[\d.,]*\s*(?:million|billion)|\$[\d.,]+)"


@dataclass(frozen=True)
class FactPattern:
    """A regex that yields one kind of fact.

    ``priority`` orders patterns for the same field (lower runs first).
    When ``whole_match`` is set the full match is the value, otherwise the
    first non-empty capture group is.
    """

    field: str
    regex: re.Pattern
    priority: int = 0
    whole_match: bool = False

    def value(self, match: re.Match) -> str:
        if self.whole_match:
            return match.group(0).strip()
        for group in match.groups():
            if group:
                return group.strip()
        return match.group(0).strip()


FACT_PATTERNS: list[FactPattern] = [
    # Founding year
    FactPattern("founded", re.compile(r"\bfounded\s+in\s+(\d{4})\b", re.I), 0),
    FactPattern("founded", re.compile(r"\bestablished\s+in\s+(\d{4})\b", re.I), 1),
    FactPattern("founded", re.compile(r"\bsince\s+(\d{4})\b", re.I), 2),
    # Headquarters
    FactPattern("headquarters", re.compile(r"\bheadquartered\s+in\s+([^.,\n]+)", re.I), 0),
    FactPattern("headquarters", re.compile(r"\bheadquarters[:\s]+([^.,\n]+)", re.I), 1),
    FactPattern("headquarters", re.compile(r"\b(?i:based)\s+in\s+([A-Z][^.,\n]+)"), 2),
    # Team size
    FactPattern("team_size", re.compile(r"(\d[\d,]*\+?)\s+employees", re.I), 0),
    FactPattern("team_size", re.compile(r"\bteam\s+of\s+(\d[\d,]*)", re.I), 1),
    FactPattern("team_size", re.compile(r"(\d[\d,]*\+?)\s+people\b", re.I), 2),
    # Money facts keep the surrounding label for context
    FactPattern("revenue", re.compile(r"revenue[:\s]+" + _MONEY, re.I), 0, whole_match=True),
    FactPattern("funding", re.compile(r"raised\s+" + _MONEY, re.I), 0, whole_match=True),
    FactPattern("funding", re.compile(r"funding[:\s]+" + _MONEY, re.I), 1, whole_match=True),
    FactPattern("valuation", re.compile(r"valuation[:\s]+(?:of\s+)?" + _MONEY, re.I), 0, whole_match=True),
    # Prices as shown on pricing pages
    FactPattern(
        "price",
        re.compile(r"\$\d+(?:,\d{3})*(?:\.\d{2})?(?:\s*/\s*(?:month|year|mo|yr|user|seat))?", re.I),
        0,
        whole_match=True,
    ),
]


def patterns_for(field: str) -> list[FactPattern]:
    return sorted((p for p in FACT_PATTERNS if p.field == field), key=lambda p: p.priority)


def first_fact(field: str, text: str) -> Optional[str]:
    """Value of the highest-priority pattern for ``field`` that matches."""
    for pattern in patterns_for(field):
        match = pattern.regex.search(text)
        if match:
            return pattern.value(match)
    return None


def all_facts(field: str, text: str) -> list[str]:
    """Every match for ``field`` in priority order, duplicates removed."""
    found: dict[str, None] = {}
    for pattern in patterns_for(field):
        for match in pattern.regex.finditer(text):
            value = re.sub(r"\s+", " ", pattern.value(match))
            found[value] = None
    return list(found)
