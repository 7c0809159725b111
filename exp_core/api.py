"""High-level entry points used by the state store and the UI."""

from __future__ import annotations

from .calculator import compute, compute_row_totals
from .data import Mode, parse_mode
from .models import CalculationOutcome, ModeState
from .projection import project


def recalculate(state: ModeState, mode: Mode | str) -> CalculationOutcome:
    """Recompute everything a renderer shows for one mode.

    Parameters
    ----------
    state:
        Current inputs of the mode.
    mode:
        Mode the state belongs to; selects the formula branch.

    Returns
    -------
    CalculationOutcome
        Row totals, results, and the run projection. ``no_selection`` is set
        when an aggregating mode has no character ticked, in which case the
        results and projection are empty.
    """

    mode = parse_mode(mode)
    results = compute(state, mode)
    no_selection = mode is not Mode.FOUR_PLAYER and not results
    return CalculationOutcome(
        mode=mode,
        row_totals=compute_row_totals(state),
        results=tuple(results),
        projection=tuple(project(results)),
        no_selection=no_selection,
    )
