"""Build model objects from plain-dict problem definitions."""

from __future__ import annotations

from dataclasses import dataclass

from bulk_resource_scheduler.model import SimpleRequirement, SimpleResource, ValueProperty
from bulk_resource_scheduler.schema import validate_problem
from bulk_resource_scheduler.types import Modifier, Sense


@dataclass(frozen=True)
class Problem:
    """Resources and requirements ready for schedule()."""

    resources: tuple[SimpleResource, ...]
    requirements: tuple[SimpleRequirement, ...]


def _build_property(data: dict) -> ValueProperty:
    return ValueProperty(
        name=data["name"],
        value=data["value"],
        sense=Sense(data.get("sense", Sense.REQUIRE.value)),
        modifier=Modifier(data.get("modifier", Modifier.EQUAL.value)),
    )


def load_problem(data: dict) -> Problem:
    """Load a Problem from a dict (e.g. parsed JSON).

    See bulk_resource_scheduler.schema for the expected shape.

    Raises ValueError if validation fails.
    """
    errors = validate_problem(data)
    if errors:
        raise ValueError(
            "Validation errors in problem definition:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    resources = tuple(
        SimpleResource(
            r["name"],
            [ValueProperty(name, value) for name, value in r.get("properties", {}).items()],
        )
        for r in data.get("resources", [])
    )
    requirements = tuple(
        SimpleRequirement(
            q["name"],
            tuple(_build_property(p) for p in q.get("properties", [])),
            minimum=q.get("min", 1),
            maximum=q.get("max", 1),
        )
        for q in data.get("requirements", [])
    )
    return Problem(resources, requirements)
