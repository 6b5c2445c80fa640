#!/usr/bin/env python
"""Visual verification report for bulk-resource-scheduler.

Run:  uv run python scripts/verify.py

Produces a formatted report showing, for every scheduler fixture scenario:
  1. The acceptability matrix (penalty per acceptable pair)
  2. The assignment against each requirement's min/max
  3. Whether the result agrees with the fixture's expectation
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from bulk_resource_scheduler.debug import show_assignment, show_candidates
from bulk_resource_scheduler.loaders import load_problem
from bulk_resource_scheduler.scheduler import schedule


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


# ---------------------------------------------------------------------------
# Scenario report
# ---------------------------------------------------------------------------
def section_scenario(spec: dict) -> bool:
    """Report one scenario. Returns True if it matches its expectation."""
    banner(f"{spec['id']}: {spec['description']}")
    problem = load_problem(spec["problem"])

    if problem.resources and problem.requirements:
        heading("Candidates")
        show_candidates(problem.resources, problem.requirements)

    assignment, error = schedule(problem.resources, problem.requirements)

    if problem.requirements:
        heading("Assignment")
        show_assignment(problem.requirements, assignment)

    actual = {res: req.name for res, req in assignment.items()}
    unmet = error.requirement_names if error else []
    ok = actual == spec["expected_map"] and unmet == spec["expected_unmet"]

    heading("Check")
    rows = [
        [res, spec["expected_map"].get(res, "-"), actual.get(res, "-")]
        for res in sorted(set(actual) | set(spec["expected_map"]))
    ]
    table(["resource", "expected", "actual"], rows)
    if error:
        print()
        for line in str(error).splitlines():
            print(f"    ! {line}")
    print(f"\n    {'PASS' if ok else 'FAIL'}")
    return ok


def main() -> int:
    data = _load(SCENARIOS / "scheduler.json")
    results = [(s["id"], section_scenario(s)) for s in data["schedule"]]

    banner("SUMMARY")
    table(["scenario", "result"], [[sid, "PASS" if ok else "FAIL"] for sid, ok in results])
    return 0 if all(ok for _, ok in results) else 1


if __name__ == "__main__":
    sys.exit(main())
