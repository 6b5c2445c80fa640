"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from typing import Sequence

from bulk_resource_scheduler.matcher import evaluate
from bulk_resource_scheduler.types import Requirement, Resource


def show_candidates(
    resources: Sequence[Resource],
    requirements: Sequence[Requirement],
) -> str:
    """Print the acceptability matrix, one row per requirement.

    Legend: '.' = not acceptable, digit = ranking penalty (lower is better).
    Returns the string and also prints to stdout.
    """
    lines: list[str] = []

    label_width = max([len(r.name) for r in requirements] + [11])
    col_width = max([len(r.name) for r in resources] + [3])

    header = "".join(f"{res.name:>{col_width}s} " for res in resources)
    lines.append(f"{'':>{label_width}s}  {header}")

    for req in requirements:
        cells = []
        for res in resources:
            result = evaluate(req, res)
            cell = str(result.penalty) if result.acceptable else "."
            cells.append(f"{cell:>{col_width}s} ")
        lines.append(f"{req.name:>{label_width}s}  {''.join(cells)}")

    lines.append("\nLegend: . = not acceptable, n = penalty (lower is better)")

    result = "\n".join(lines)
    print(result)
    return result


def show_assignment(
    requirements: Sequence[Requirement],
    assignment: dict[str, Requirement],
) -> str:
    """Print each requirement's fill against its min/max.

    Unassigned resources are not listed. Returns the string and also prints
    to stdout.
    """
    lines: list[str] = []

    by_req: dict[str, list[str]] = {req.name: [] for req in requirements}
    for res_name, req in assignment.items():
        by_req.setdefault(req.name, []).append(res_name)

    label_width = max([len(r.name) for r in requirements] + [11])
    for req in requirements:
        minimum, maximum = req.count()
        assigned = by_req[req.name]
        status = "ok" if len(assigned) >= minimum else "SHORT"
        bar = "#" * len(assigned) + "-" * max(maximum - len(assigned), 0)
        lines.append(
            f"{req.name:>{label_width}s}  [{bar:<{max(maximum, 1)}s}] "
            f"{len(assigned)}/{minimum}..{maximum} {status:<5s} "
            f"{', '.join(assigned)}"
        )

    result = "\n".join(lines)
    print(result)
    return result
