"""Cumulative run projections derived from a result list."""

from __future__ import annotations

from collections.abc import Sequence

from .data import MAX_RUNS
from .models import ProjectionCell, ProjectionRow, ResultEntry


def project(results: Sequence[ResultEntry], max_runs: int = MAX_RUNS) -> list[ProjectionRow]:
    """Return cumulative totals for ``max_runs`` down to one run.

    Results are already whole numbers, so each cell is an exact product.
    An empty result list yields an empty projection.
    """

    if not results:
        return []
    return [
        ProjectionRow(
            run_count=run,
            values=tuple(
                ProjectionCell(label=entry.label, exp=entry.exp * run, bp=entry.bp * run)
                for entry in results
            ),
        )
        for run in range(max_runs, 0, -1)
    ]
