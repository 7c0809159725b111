"""Per-mode calculator state and the setters the input layer drives."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from .api import recalculate
from .data import (
    CHARACTER_COUNT,
    MODES,
    STAT_COLUMNS,
    TWO_PLAYER_COOP_COUNT,
    Mode,
    canonical_field_name,
    coerce_number,
    parse_mode,
)
from .models import CalculationOutcome, CharacterBonus, ModeState

Listener = Callable[[Mode, CalculationOutcome], None]


def create_mode_state(mode: Mode) -> ModeState:
    """Return the starting state for a mode."""

    state = ModeState()
    if mode is Mode.TWO_PLAYER:
        state.coop_count = TWO_PLAYER_COOP_COUNT
    return state


class StateStore:
    """Owns one independent ``ModeState`` per mode and recalculates on change.

    Every setter coerces its value, recomputes the owning mode, notifies the
    subscribed listeners, and returns the fresh outcome. Other modes are
    never touched.
    """

    def __init__(self, active_mode: Mode | str = Mode.FOUR_PLAYER) -> None:
        self._states: dict[Mode, ModeState] = {mode: create_mode_state(mode) for mode in MODES}
        self._outcomes: dict[Mode, CalculationOutcome] = {
            mode: recalculate(state, mode) for mode, state in self._states.items()
        }
        self._listeners: list[Listener] = []
        self._active_mode = parse_mode(active_mode)

    @property
    def active_mode(self) -> Mode:
        return self._active_mode

    def state(self, mode: Mode | str) -> ModeState:
        """Return the live state record of a mode."""

        return self._states[parse_mode(mode)]

    def last_outcome(self, mode: Mode | str) -> CalculationOutcome:
        """Return the outcome computed after the mode's latest change."""

        return self._outcomes[parse_mode(mode)]

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked as ``listener(mode, outcome)`` after each change."""

        self._listeners.append(listener)
        logger.info(f"Listener subscribed ({len(self._listeners)} active)")

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def select_mode(self, mode: Mode | str) -> CalculationOutcome:
        """Make ``mode`` the displayed one and return its last outcome.

        Nothing is recomputed and no stored value changes.
        """

        self._active_mode = parse_mode(mode)
        logger.info(f"Active mode set to {self._active_mode.value}")
        return self._outcomes[self._active_mode]

    def set_field(self, mode: Mode | str, field: str, raw: object) -> CalculationOutcome:
        """Store a numeric input of the mode, e.g. ``base_exp`` or ``coopCount``.

        Parameters
        ----------
        mode:
            Mode that owns the field.
        field:
            Stored field name or its camelCase alias.
        raw:
            Raw input; unparseable text is stored as 0.

        Raises
        ------
        ValueError
            If the mode or field name is unknown.
        """

        mode = parse_mode(mode)
        name = canonical_field_name(field)
        value = coerce_number(raw)
        if name == "coop_count" and mode is Mode.TWO_PLAYER:
            value = min(value, TWO_PLAYER_COOP_COUNT)
        setattr(self._states[mode], name, value)
        return self._recalculate(mode)

    def set_character_stat(
        self,
        mode: Mode | str,
        char_index: int,
        stat_type: str,
        column: int,
        raw: object,
    ) -> CalculationOutcome:
        """Store one bonus column of a character's EXP or BP row."""

        mode = parse_mode(mode)
        character = self._character(mode, char_index)
        stats = character.stats_for(stat_type)
        stats[_check_index(column, STAT_COLUMNS, "column")] = coerce_number(raw)
        return self._recalculate(mode)

    def set_character_selected(
        self,
        mode: Mode | str,
        char_index: int,
        checked: bool,
    ) -> CalculationOutcome:
        """Tick or untick a character for the aggregate; four-player mode ignores it."""

        mode = parse_mode(mode)
        character = self._character(mode, char_index)
        character.selected = bool(checked)
        return self._recalculate(mode)

    def _character(self, mode: Mode, char_index: int) -> CharacterBonus:
        return self._states[mode].characters[_check_index(char_index, CHARACTER_COUNT, "character")]

    def _recalculate(self, mode: Mode) -> CalculationOutcome:
        outcome = recalculate(self._states[mode], mode)
        self._outcomes[mode] = outcome
        logger.debug(
            f"Recalculated {mode.value}: {len(outcome.results)} results, "
            f"no_selection={outcome.no_selection}"
        )
        for listener in list(self._listeners):
            listener(mode, outcome)
        return outcome


def _check_index(index: int, size: int, name: str) -> int:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < size:
        raise ValueError(f"{name.capitalize()} index must be in [0, {size}), received {index!r}")
    return index
