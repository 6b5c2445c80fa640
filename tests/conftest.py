"""Shared test fixtures and data loading for bulk-resource-scheduler.

All scenario data lives in data/fixtures/scenarios/ as JSON files.  This
module loads that data and exposes helper functions + pytest fixtures for
the tests.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def prop(name: str, value, sense: str = "require", modifier: str = "equal"):
    """ValueProperty from plain strings.

    >>> prop("P1", 1, "prefer")
    ValueProperty(name='P1', value=1, sense=<Sense.PREFER: 'prefer'>, ...)
    """
    from bulk_resource_scheduler.model import ValueProperty
    from bulk_resource_scheduler.types import Modifier, Sense

    return ValueProperty(name, value, Sense(sense), Modifier(modifier))


def make_resource(name: str, **values):
    """SimpleResource with one EQUAL property per keyword."""
    from bulk_resource_scheduler.model import SimpleResource

    return SimpleResource(name, [prop(k, v) for k, v in values.items()])


def make_requirement(name: str, *props, minimum: int = 1, maximum: int = 1):
    """SimpleRequirement from already-built properties."""
    from bulk_resource_scheduler.model import SimpleRequirement

    return SimpleRequirement(name, props, minimum, maximum)


def load_problem_scenario(spec: dict):
    """Problem built from a scenario's "problem" definition."""
    from bulk_resource_scheduler.loaders import load_problem

    return load_problem(spec["problem"])


def names(assignment: dict) -> dict[str, str]:
    """Resource name -> requirement name, for comparing with fixtures."""
    return {res: req.name for res, req in assignment.items()}


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def shared_pool():
    """Three P1 resources, the last also carrying P2."""
    return [
        make_resource("R1", P1=1),
        make_resource("R2", P1=1),
        make_resource("R3", P1=1, P2=1),
    ]


@pytest.fixture
def open_requirement():
    """Takes one or two P1 resources."""
    return make_requirement("Req1", prop("P1", 1), minimum=1, maximum=2)
