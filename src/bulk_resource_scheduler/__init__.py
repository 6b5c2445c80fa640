"""bulk-resource-scheduler: Greedy matching of resources to requirements."""

from bulk_resource_scheduler.loaders import Problem, load_problem
from bulk_resource_scheduler.matcher import MatchResult, evaluate, matches
from bulk_resource_scheduler.model import SimpleRequirement, SimpleResource, ValueProperty
from bulk_resource_scheduler.scheduler import Candidate, schedule
from bulk_resource_scheduler.types import (
    Modifier,
    Property,
    PropertyMatchError,
    PropertyNameError,
    PropertyTypeError,
    Requirement,
    Resource,
    Sense,
    Shortfall,
    UnmetMinimumError,
)

__all__ = [
    "Candidate",
    "MatchResult",
    "Modifier",
    "Problem",
    "Property",
    "PropertyMatchError",
    "PropertyNameError",
    "PropertyTypeError",
    "Requirement",
    "Resource",
    "Sense",
    "Shortfall",
    "SimpleRequirement",
    "SimpleResource",
    "UnmetMinimumError",
    "ValueProperty",
    "evaluate",
    "load_problem",
    "matches",
    "schedule",
]
