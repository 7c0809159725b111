"""EXP and BP run calculator: per-mode state, formulas, and run projections."""

from .api import recalculate
from .calculator import (
    coop_bp,
    coop_exp,
    coop_factor,
    compute,
    compute_row_totals,
    floor_amount,
    row_total,
    selected_characters,
    solo_exp,
)
from .config import DEFAULT_SETTINGS, SETTINGS_FILENAME, load_settings, setup_logging
from .data import (
    AGGREGATE_LABEL,
    CHARACTER_COUNT,
    MAX_RUNS,
    MODE_LABELS,
    MODES,
    NO_SELECTION_MESSAGE,
    NUMERIC_FIELDS,
    STAT_COLUMNS,
    STAT_TYPES,
    Mode,
    canonical_field_name,
    character_label,
    coerce_number,
    parse_mode,
)
from .formatting import (
    format_amount,
    format_percent,
    projection_header,
    shows_bp,
    uses_coop_inputs,
    uses_friend_ls,
    uses_selection,
)
from .models import (
    CalculationOutcome,
    CharacterBonus,
    ModeState,
    ProjectionCell,
    ProjectionRow,
    ResultEntry,
    RowTotals,
)
from .projection import project
from .state import StateStore, create_mode_state

__all__ = [
    "AGGREGATE_LABEL",
    "CHARACTER_COUNT",
    "CalculationOutcome",
    "CharacterBonus",
    "DEFAULT_SETTINGS",
    "MAX_RUNS",
    "MODES",
    "MODE_LABELS",
    "Mode",
    "ModeState",
    "NO_SELECTION_MESSAGE",
    "NUMERIC_FIELDS",
    "ProjectionCell",
    "ProjectionRow",
    "ResultEntry",
    "RowTotals",
    "SETTINGS_FILENAME",
    "STAT_COLUMNS",
    "STAT_TYPES",
    "StateStore",
    "canonical_field_name",
    "character_label",
    "coerce_number",
    "compute",
    "compute_row_totals",
    "coop_bp",
    "coop_exp",
    "coop_factor",
    "create_mode_state",
    "floor_amount",
    "format_amount",
    "format_percent",
    "load_settings",
    "parse_mode",
    "project",
    "projection_header",
    "recalculate",
    "row_total",
    "selected_characters",
    "setup_logging",
    "shows_bp",
    "solo_exp",
    "uses_coop_inputs",
    "uses_friend_ls",
    "uses_selection",
]
