"""Bulk scheduler: assign each resource to at most one requirement.

Greedy, two passes, no backtracking:

1. Build the acceptability relation for every (requirement, resource) pair.
2. Order requirements by slack (acceptable candidates minus minimum), so the
   scarcest requirements pick first.
3. Min-fill: in slack order, give each requirement its minimum from its best
   still-unassigned candidates. Shortfalls are recorded, not fatal.
4. Max-fill: in input order, top each requirement up towards its maximum.

Ties are broken by input order throughout, so results are deterministic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from bulk_resource_scheduler.matcher import evaluate, resource_properties
from bulk_resource_scheduler.types import (
    Requirement,
    Resource,
    Shortfall,
    UnmetMinimumError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """A resource acceptable to some requirement, with its ranking penalty."""

    resource: Resource
    penalty: int


def _candidate_key(
    candidate: Candidate,
    assignment: dict[str, Requirement],
    acceptable_to: dict[str, list[Requirement]],
) -> tuple[bool, int, int]:
    """Sort key: unassigned first, then lower penalty, then less contended."""
    name = candidate.resource.name
    return (
        name in assignment,
        candidate.penalty,
        len(acceptable_to.get(name, ())),
    )


def _slack(req: Requirement, acceptable: dict[str, list[Candidate]]) -> int:
    minimum, _ = req.count()
    return len(acceptable[req.name]) - minimum


def _fill(
    req: Requirement,
    candidates: list[Candidate],
    limit: int,
    assignment: dict[str, Requirement],
    n_assigned: dict[str, int],
) -> None:
    """Assign unassigned candidates, in order, until req holds ``limit``."""
    for candidate in candidates:
        if n_assigned[req.name] >= limit:
            break
        name = candidate.resource.name
        if name not in assignment:
            assignment[name] = req
            n_assigned[req.name] += 1


def schedule(
    resources: Sequence[Resource],
    requirements: Sequence[Requirement],
    *,
    strict: bool = False,
) -> tuple[dict[str, Requirement], UnmetMinimumError | None]:
    """Match resources to requirements, each resource filling at most one.

    Args:
        resources: Resources available for assignment. Names must be unique.
        requirements: Requirements to satisfy. Names must be unique.
        strict: Raise the UnmetMinimumError instead of returning it.

    Returns:
        (assignment, error): assignment maps resource name to the requirement
        it fills. error is None when every requirement got at least its
        minimum, otherwise an UnmetMinimumError listing the shortfalls. The
        assignment is returned either way and holds whatever was placed.

    Raises:
        UnmetMinimumError: Only when strict is set and a minimum is unmet.
    """
    logger.debug(
        f"Scheduling {len(resources)} resources against "
        f"{len(requirements)} requirements"
    )

    acceptable: dict[str, list[Candidate]] = {req.name: [] for req in requirements}
    acceptable_to: dict[str, list[Requirement]] = {}
    indexed = [(res, resource_properties(res)) for res in resources]
    for req in requirements:
        for res, res_props in indexed:
            result = evaluate(req, res, res_props)
            if result.acceptable:
                acceptable[req.name].append(Candidate(res, result.penalty))
                acceptable_to.setdefault(res.name, []).append(req)

    sorted_reqs = sorted(requirements, key=lambda r: _slack(r, acceptable))

    assignment: dict[str, Requirement] = {}
    n_assigned = {req.name: 0 for req in requirements}
    shortfalls: list[Shortfall] = []

    # Min-fill. The key reads the live assignment, so re-sort every time.
    for req in sorted_reqs:
        candidates = acceptable[req.name]
        candidates.sort(key=lambda c: _candidate_key(c, assignment, acceptable_to))
        minimum, _ = req.count()
        _fill(req, candidates, minimum, assignment, n_assigned)
        if n_assigned[req.name] < minimum:
            shortfall = Shortfall(req.name, minimum, n_assigned[req.name])
            logger.warning(shortfall.message)
            shortfalls.append(shortfall)
        else:
            logger.debug(
                f"Min-fill {req.name}: {n_assigned[req.name]}/{minimum} "
                f"from {len(candidates)} candidates"
            )

    # Max-fill in input order, reusing the min-fill ordering.
    for req in requirements:
        _, maximum = req.count()
        _fill(req, acceptable[req.name], maximum, assignment, n_assigned)

    logger.debug(
        f"Assigned {len(assignment)}/{len(resources)} resources, "
        f"{len(shortfalls)} unmet minima"
    )

    if not shortfalls:
        return assignment, None
    error = UnmetMinimumError(shortfalls, assignment)
    if strict:
        raise error
    return assignment, error
