"""Input validation for plain-dict problem definitions.

A problem definition looks like::

    {
        "resources": [
            {"name": "R1", "properties": {"P1": 1, "P2": 1}},
            ...
        ],
        "requirements": [
            {
                "name": "Req1", "min": 1, "max": 2,
                "properties": [
                    {"name": "P1", "value": 1, "sense": "require", "modifier": "equal"},
                    ...
                ]
            },
            ...
        ]
    }

sense defaults to "require" and modifier to "equal".
"""

from __future__ import annotations

from bulk_resource_scheduler.types import Modifier, Sense

_SENSES = {s.value for s in Sense}
_MODIFIERS = {m.value for m in Modifier}


def _check_unique(entries: list, kind: str, errors: list[str]) -> None:
    seen: set[str] = set()
    for entry in entries:
        name = entry.get("name") if isinstance(entry, dict) else None
        if not isinstance(name, str):
            continue
        if name in seen:
            errors.append(f"Duplicate {kind} name: {name!r}")
        seen.add(name)


def validate_resources(resources: list) -> list[str]:
    """Validate resource entries. Returns list of error messages.

    Checks:
    - Each entry is a dict with a string name
    - properties is a dict keyed by property name
    - Names are unique
    """
    errors: list[str] = []

    for i, entry in enumerate(resources):
        if not isinstance(entry, dict):
            errors.append(f"Resource {i}: expected object, got {type(entry).__name__}")
            continue
        if not isinstance(entry.get("name"), str):
            errors.append(f"Resource {i}: missing or non-string 'name'")
        props = entry.get("properties", {})
        if not isinstance(props, dict):
            errors.append(
                f"Resource {entry.get('name', i)}: 'properties' must be an object"
            )

    _check_unique(resources, "resource", errors)
    return errors


def validate_requirements(requirements: list) -> list[str]:
    """Validate requirement entries. Returns list of error messages.

    Checks:
    - Each entry is a dict with a string name
    - min and max are integers with 0 <= min <= max
    - Each property has a name and a value, and a known sense and modifier
    - Names are unique
    """
    errors: list[str] = []

    for i, entry in enumerate(requirements):
        if not isinstance(entry, dict):
            errors.append(
                f"Requirement {i}: expected object, got {type(entry).__name__}"
            )
            continue
        label = entry.get("name", i)
        if not isinstance(entry.get("name"), str):
            errors.append(f"Requirement {i}: missing or non-string 'name'")

        lo, hi = entry.get("min", 1), entry.get("max", 1)
        if not isinstance(lo, int) or isinstance(lo, bool) or lo < 0:
            errors.append(f"Requirement {label}: 'min' must be a non-negative integer")
        elif not isinstance(hi, int) or isinstance(hi, bool):
            errors.append(f"Requirement {label}: 'max' must be an integer")
        elif hi < lo:
            errors.append(f"Requirement {label}: max ({hi}) is less than min ({lo})")

        props = entry.get("properties", [])
        if not isinstance(props, list):
            errors.append(f"Requirement {label}: 'properties' must be a list")
            continue

        for j, prop in enumerate(props):
            if not isinstance(prop, dict):
                errors.append(f"Requirement {label}, property {j}: expected object")
                continue
            if not isinstance(prop.get("name"), str):
                errors.append(
                    f"Requirement {label}, property {j}: missing or non-string 'name'"
                )
            if "value" not in prop:
                errors.append(f"Requirement {label}, property {j}: missing 'value'")
            sense = prop.get("sense", Sense.REQUIRE.value)
            if sense not in _SENSES:
                errors.append(
                    f"Requirement {label}, property {j}: unknown sense {sense!r} "
                    f"(expected one of {sorted(_SENSES)})"
                )
            modifier = prop.get("modifier", Modifier.EQUAL.value)
            if modifier not in _MODIFIERS:
                errors.append(
                    f"Requirement {label}, property {j}: unknown modifier "
                    f"{modifier!r} (expected one of {sorted(_MODIFIERS)})"
                )

    _check_unique(requirements, "requirement", errors)
    return errors


def validate_problem(data: dict) -> list[str]:
    """Validate a whole problem definition. Returns list of error messages (empty = valid)."""
    if not isinstance(data, dict):
        return [f"Problem must be an object, got {type(data).__name__}"]

    errors: list[str] = []
    resources = data.get("resources", [])
    requirements = data.get("requirements", [])

    if isinstance(resources, list):
        errors.extend(validate_resources(resources))
    else:
        errors.append("'resources' must be a list")

    if isinstance(requirements, list):
        errors.extend(validate_requirements(requirements))
    else:
        errors.append("'requirements' must be a list")

    return errors
