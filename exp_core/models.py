"""Dataclasses shared across the state store, calculator, and projection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .data import (
    CHARACTER_COUNT,
    DEFAULT_BOOK,
    DEFAULT_COOP_COUNT,
    STAT_COLUMNS,
    Mode,
    StatRow,
)


def _zero_row() -> StatRow:
    return [0.0] * STAT_COLUMNS


@dataclass
class CharacterBonus:
    """Bonus percentages contributed by one playable character."""

    exp_stats: StatRow = field(default_factory=_zero_row)
    bp_stats: StatRow = field(default_factory=_zero_row)
    selected: bool = False

    def stats_for(self, stat_type: str) -> StatRow:
        """Return the EXP or BP column list, rejecting any other stat type."""

        if stat_type == "exp":
            return self.exp_stats
        if stat_type == "bp":
            return self.bp_stats
        raise ValueError(f"Unknown stat type '{stat_type}'")


def _default_characters() -> list[CharacterBonus]:
    return [CharacterBonus() for _ in range(CHARACTER_COUNT)]


@dataclass
class ModeState:
    """Every input the calculator reads for one play mode."""

    base_exp: float = 0.0
    base_bp: float = 0.0
    book: float = DEFAULT_BOOK
    ls_exp: float = 0.0
    ls_bp: float = 0.0
    coop_count: float = DEFAULT_COOP_COUNT
    mutual: float = 0.0
    return_bonus: float = 0.0
    friend_ls: float = 0.0
    characters: list[CharacterBonus] = field(default_factory=_default_characters)


@dataclass(frozen=True)
class ResultEntry:
    """Final per-run EXP and BP for one character or for the selected party."""

    label: str
    exp: int
    bp: int
    character_index: Optional[int] = None


@dataclass(frozen=True)
class ProjectionCell:
    """Cumulative EXP and BP of one result after a number of runs."""

    label: str
    exp: int
    bp: int


@dataclass(frozen=True)
class ProjectionRow:
    """Cumulative totals of every result for a single run count."""

    run_count: int
    values: tuple[ProjectionCell, ...]


@dataclass(frozen=True)
class RowTotals:
    """Sum of each character's nine bonus columns, per stat type."""

    exp: tuple[float, ...]
    bp: tuple[float, ...]


@dataclass(frozen=True)
class CalculationOutcome:
    """Everything a renderer needs after one recalculation of a mode."""

    mode: Mode
    row_totals: RowTotals
    results: tuple[ResultEntry, ...]
    projection: tuple[ProjectionRow, ...]
    no_selection: bool = False
