"""Pairwise matcher: is one resource acceptable to one requirement, and how well.

Acceptable means:

1. every REQUIRE property of the requirement has a same-named property on
   the resource that it matches, and
2. no NEVER property of the requirement has a same-named property on the
   resource that it matches.

PREFER and AVOID never affect acceptability, only the scores.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from bulk_resource_scheduler.types import (
    Property,
    PropertyMatchError,
    Requirement,
    Resource,
    Sense,
)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of comparing one requirement with one resource."""

    acceptable: bool
    unmet_prefers: int = 0
    avoid_hits: int = 0

    @property
    def preference(self) -> int:
        """Signed score: +1 per unmet PREFER, -1 per AVOID hit."""
        return self.unmet_prefers - self.avoid_hits

    @property
    def penalty(self) -> int:
        """Ranking score, lower is better. Every AVOID hit counts against."""
        return self.unmet_prefers + self.avoid_hits


def resource_properties(resource: Resource) -> Mapping[str, Property]:
    """Name-keyed view of a resource's properties."""
    props = resource.properties
    if isinstance(props, Mapping):
        return props
    return {p.name: p for p in props}


def _compare(req_prop: Property, res_prop: Property) -> bool | None:
    """req_prop.matches(res_prop), or None when there is no definite answer."""
    try:
        return bool(req_prop.matches(res_prop))
    except PropertyMatchError:
        return None


def evaluate(
    requirement: Requirement,
    resource: Resource,
    res_props: Mapping[str, Property] | None = None,
) -> MatchResult:
    """Score ``resource`` against every property of ``requirement``.

    Every property is visited even once the pair is known to be
    unacceptable, so the scores are always complete. ``res_props`` may be
    passed to reuse an index built by resource_properties().
    """
    if res_props is None:
        res_props = resource_properties(resource)

    acceptable = True
    unmet_prefers = 0
    avoid_hits = 0
    for p in requirement.properties:
        prop = res_props.get(p.name)
        if p.sense is Sense.REQUIRE:
            if prop is None or _compare(p, prop) is False:
                acceptable = False
        elif p.sense is Sense.PREFER:
            if prop is None or _compare(p, prop) is False:
                unmet_prefers += 1
        elif p.sense is Sense.AVOID:
            if prop is not None and _compare(p, prop) is True:
                avoid_hits += 1
        elif p.sense is Sense.NEVER:
            if prop is not None and _compare(p, prop) is True:
                acceptable = False

    return MatchResult(acceptable, unmet_prefers, avoid_hits)


def matches(requirement: Requirement, resource: Resource) -> tuple[bool, int]:
    """Return (acceptable, preference) for one pair.

    Each unmet or missing PREFER adds one to preference and each matching
    AVOID subtracts one. A property whose comparison raises
    PropertyMatchError is treated as not known to mismatch. The scheduler
    ranks candidates by MatchResult.penalty rather than this signed score.
    """
    result = evaluate(requirement, resource)
    return result.acceptable, result.preference
