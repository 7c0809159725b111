"""EXP and BP formulas for each play mode."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .data import AGGREGATE_LABEL, COOP_PARTY_BONUS, Mode, character_label
from .models import CharacterBonus, ModeState, ResultEntry, RowTotals


def floor_amount(value: float) -> int:
    """Floor toward negative infinity; overflowed amounts read as zero."""

    if not math.isfinite(value):
        return 0
    return math.floor(value)


def row_total(stats: Iterable[float]) -> float:
    """Return the sum of a character's bonus columns for one stat type."""

    return sum(stats, 0.0)


def compute_row_totals(state: ModeState) -> RowTotals:
    """Return the EXP and BP row totals of every character, in order."""

    return RowTotals(
        exp=tuple(row_total(char.exp_stats) for char in state.characters),
        bp=tuple(row_total(char.bp_stats) for char in state.characters),
    )


def coop_factor(state: ModeState) -> float:
    """Return the party multiplier applied to EXP in the cooperative modes."""

    return (
        1
        + COOP_PARTY_BONUS * state.coop_count
        + state.mutual / 100
        + state.return_bonus / 100
    )


def coop_exp(state: ModeState, exp_bonus: float) -> int:
    """Return floored cooperative EXP for the given summed character bonus."""

    exp = state.base_exp * (1 + (state.ls_exp + exp_bonus) / 100) * coop_factor(state) * state.book
    return floor_amount(exp)


def coop_bp(state: ModeState, bp_bonus: float) -> int:
    """Return floored BP for the given summed character bonus."""

    return floor_amount(state.base_bp * (1 + (state.ls_bp + bp_bonus) / 100))


def solo_exp(state: ModeState, exp_bonus: float) -> int:
    """Return floored solo EXP; the friend leader skill replaces party bonuses."""

    total_percent = state.ls_exp + state.friend_ls + exp_bonus
    return floor_amount(state.base_exp * (1 + total_percent / 100) * state.book)


def selected_characters(state: ModeState) -> list[CharacterBonus]:
    """Return the characters ticked for aggregation, in table order."""

    return [char for char in state.characters if char.selected]


def compute(state: ModeState, mode: Mode) -> list[ResultEntry]:
    """Turn a mode's state into its result list.

    Parameters
    ----------
    state:
        Inputs of the mode being calculated.
    mode:
        Selects the formula branch.

    Returns
    -------
    list[ResultEntry]
        Five entries in four-player mode, one per character. One aggregate
        entry in the other modes, or none when no character is selected.
    """

    if mode is Mode.FOUR_PLAYER:
        return [
            ResultEntry(
                label=character_label(index),
                exp=coop_exp(state, row_total(char.exp_stats)),
                bp=coop_bp(state, row_total(char.bp_stats)),
                character_index=index,
            )
            for index, char in enumerate(state.characters)
        ]

    chosen = selected_characters(state)
    if not chosen:
        return []

    sum_exp_mods = _sum_row_totals(char.exp_stats for char in chosen)
    if mode is Mode.SOLO:
        return [ResultEntry(label=AGGREGATE_LABEL, exp=solo_exp(state, sum_exp_mods), bp=0)]

    sum_bp_mods = _sum_row_totals(char.bp_stats for char in chosen)
    return [
        ResultEntry(
            label=AGGREGATE_LABEL,
            exp=coop_exp(state, sum_exp_mods),
            bp=coop_bp(state, sum_bp_mods),
        )
    ]


def _sum_row_totals(rows: Iterable[Sequence[float]]) -> float:
    return sum((row_total(row) for row in rows), 0.0)
