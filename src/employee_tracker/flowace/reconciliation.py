"""Match Flowace rows that carry no usable member id to employees by name.

Flowace names are typed by hand in the productivity tool and drift from the
HR directory (typos, initials, doubled spaces), so several progressively
looser rules are tried in order.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

# Flowace name (lowered) -> employee name (lowered) for names no rule can bridge
SPECIAL_MAPPINGS = {
    "naryan yadav": "narayan",
    "nandini k": "nandini",
    "divya  gatkal": "divya",
    "prarthana g": "prarthana",
}

EXACT = "exact name match"
PARTIAL = "partial name match"
FIRST_NAME = "first name match"
SPECIAL = "special mapping"


class Named(Protocol):
    name: str


def match_employee(flowace_name: str, employees: Sequence[Named]) -> Optional[tuple[Named, str]]:
    """Return ``(employee, reason)`` for the first rule that matches, else None."""
    target = (flowace_name or "").strip().lower()
    if not target:
        return None

    normalized = [(e, (e.name or "").strip().lower()) for e in employees]

    for employee, name in normalized:
        if name == target:
            return employee, EXACT

    for employee, name in normalized:
        if name and (target in name or name in target):
            return employee, PARTIAL

    first = target.split()[0]
    for employee, name in normalized:
        if name and name.startswith(first):
            return employee, FIRST_NAME

    alias = SPECIAL_MAPPINGS.get((flowace_name or "").lower())
    if alias:
        for employee, name in normalized:
            if name == alias:
                return employee, SPECIAL

    return None
